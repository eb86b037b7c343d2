"""Exceptions raised when a generation run cannot continue."""


class DocumarkError(Exception):
    """Base class for fatal generation errors."""


class MissingMetadataError(DocumarkError):
    """An assembly or type lacks metadata the generator depends on."""


class MetadataFormatError(DocumarkError):
    """A metadata description file could not be interpreted."""


class InvalidPathError(DocumarkError):
    """A name could not be sanitized into a legal output path."""
