"""Tag Normalization — turns arbitrary client input into a bounded list of slug tags.

Invariants:
    - normalize_tags is PURE and never raises
    - Output has at most MAX_TAGS entries, all unique, non-empty and lowercase
    - First occurrence wins when two inputs clean to the same slug

Design Decisions:
    - Only list/tuple accepted as a tag collection: a bare string is not a list of tags
    - Exactly one leading '#' stripped, matching how tags are typed in the client
"""

import re

MAX_TAGS: int = 10

_WHITESPACE_RUN = re.compile(r"\s+")


def _clean_tag(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    cleaned = tag.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    return _WHITESPACE_RUN.sub("-", cleaned).lower()


def normalize_tags(tags: object) -> list[str]:
    """Normalize raw tags into deduplicated slugs, capped at MAX_TAGS."""
    if not isinstance(tags, (list, tuple)):
        return []

    seen: dict[str, None] = {}
    for tag in tags:
        slug = _clean_tag(tag)
        if slug:
            seen.setdefault(slug, None)
    return list(seen)[:MAX_TAGS]
