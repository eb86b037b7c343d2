"""The formatting primitives a document is assembled from."""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Backend(ABC):
    """One output markup flavor (Markdown, HTML, ...).

    Every primitive returns a string in the target markup; the generator never
    emits markup of its own.
    """

    extension: str = "txt"

    @abstractmethod
    def preformatted(self, text: str) -> str: ...

    @abstractmethod
    def block(self, text: str) -> str: ...

    @abstractmethod
    def italics(self, text: str, style: str = "cs") -> str: ...

    @abstractmethod
    def bold(self, text: str, style: str = "cs") -> str: ...

    @abstractmethod
    def inline_code(self, text: str, style: str = "cs") -> str: ...

    @abstractmethod
    def table(
        self,
        header_left: str,
        header_right: str,
        rows: Iterable[tuple[str, str]],
    ) -> str: ...

    @abstractmethod
    def header(self, level: int, text: str) -> str: ...

    @abstractmethod
    def code(self, text: str, style: str = "cs") -> str: ...

    @abstractmethod
    def link(self, text: str, target: str) -> str: ...

    @abstractmethod
    def badge(self, text: str) -> str: ...

    @abstractmethod
    def divider(self) -> str: ...

    @abstractmethod
    def escape(self, text: str) -> str: ...
