"""URL path templating for API endpoints."""

from __future__ import annotations

from urllib.parse import quote

# Sub-delimiters a single path segment may carry unescaped besides the
# unreserved set. ";" and "," are left out since they delimit segment params.
_SEGMENT_SAFE = "$&+=:@"


def escape_segment(value: str) -> str:
    """Percent-escape a value so it stays within one path segment.

    A value made only of dots is escaped too, otherwise URL normalization
    would treat ``.`` and ``..`` as relative segments and drop them.
    """
    if value and value.strip(".") == "":
        return "%2E" * len(value)
    return quote(value, safe=_SEGMENT_SAFE)


def build_path(template: str, params: dict[str, str]) -> str:
    """Substitute ``{name}`` placeholders in *template* with escaped values."""
    path = template
    for key, value in params.items():
        path = path.replace("{" + key + "}", escape_segment(value))
    return path
