"""Store tag helpers.

Items and ingredients carry their stores in a single ``supermarket`` string
where several tags are joined with commas (``"Costco, H mart"``). Store names
themselves may therefore never contain a comma.
"""

from collections.abc import Iterable

DEFAULT_SUPERMARKET = "General"

# Always offered in the store picker and never removable
DEFAULT_STORES = ("Costco", "Trader Joe's", "99 Ranch", "H mart")

TAG_SEPARATOR = ","


def parse_store_tags(value: str | None) -> list[str]:
    """Split a comma-joined supermarket string into distinct, trimmed tags."""
    if not value:
        return []

    tags: list[str] = []
    seen: set[str] = set()
    for piece in value.split(TAG_SEPARATOR):
        tag = piece.strip()
        if not tag or tag.casefold() in seen:
            continue
        seen.add(tag.casefold())
        tags.append(tag)
    return tags


def join_store_tags(tags: Iterable[str]) -> str:
    """Join tags back into the stored representation, defaulting to General."""
    cleaned = parse_store_tags(TAG_SEPARATOR.join(tags))
    if not cleaned:
        return DEFAULT_SUPERMARKET
    return f"{TAG_SEPARATOR} ".join(cleaned)


def normalize_supermarket(value: str | None) -> str:
    """Normalize a raw supermarket value; empty or whitespace becomes General."""
    return join_store_tags([value or ""])


def is_valid_store_name(name: str | None) -> bool:
    """A store name is usable when it is non-empty after trimming and comma-free."""
    if name is None:
        return False
    trimmed = name.strip()
    return bool(trimmed) and TAG_SEPARATOR not in trimmed


def is_default_store(name: str) -> bool:
    """Check whether a name matches one of the fixed default stores."""
    folded = name.strip().casefold()
    return any(store.casefold() == folded for store in DEFAULT_STORES)


def sanitize_store_names(names: Iterable[str | None]) -> list[str]:
    """Trim names and drop empty, comma-containing and repeated entries.

    First-seen order is preserved, so callers should pass names already
    ordered the way they want them returned.
    """
    result: list[str] = []
    seen: set[str] = set()
    for raw in names:
        if not is_valid_store_name(raw):
            continue
        name = raw.strip()
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result
