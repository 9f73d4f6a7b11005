"""Notification Preview — short text shown next to a help-offer notification."""

PREVIEW_LIMIT: int = 140


def trim_preview(value: str | None, limit: int = PREVIEW_LIMIT) -> str | None:
    """Trim to at most `limit` chars, ending in '...' when cut. None for blank input."""
    if not value:
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    if len(cleaned) <= limit:
        return cleaned
    return f"{cleaned[:limit - 3].rstrip()}..."


def build_help_preview(title: str, description: str) -> str | None:
    """Description preferred; title when the description is blank."""
    return trim_preview(description) or trim_preview(title)
