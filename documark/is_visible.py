"""Predicates for the access levels that make it into the documentation."""

PUBLIC = "public"
PROTECTED = "protected"

ACCESS_LEVELS = {
    "public",
    "protected",
    "internal",
    "private",
    "protected internal",
    "private protected",
}


def is_visible(access: str | None) -> bool:
    """Check if an access level is public or protected."""
    return access in (PUBLIC, PROTECTED)
