"""Logic for layering a user configuration over the defaults."""

from typing import Any

# List options where a user file extends the defaults instead of replacing them
ADDITIVE_KEYS = frozenset({"ignored_method_names"})


def _merge_unique(base: list[Any], extra: list[Any]) -> list[Any]:
    merged = list(base)
    merged.extend(v for v in extra if v not in merged)
    return merged


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: frozenset[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return base overlaid with update, leaving both inputs untouched.

    Nested mappings merge key by key and scalars are replaced. Lists are
    replaced too, except under additive_keys, where new entries are appended
    after the existing ones.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value, additive_keys)
        elif key in additive_keys and isinstance(current, list):
            if not isinstance(value, list):
                value = [value]
            result[key] = _merge_unique(current, value)
        else:
            result[key] = value
    return result
