"""
Jinja2 filters that turn untrusted text into Ruby string literal bodies.

sass_content: body of a double-quoted Ruby literal. ASCII passes through
(backslash doubled); every non-ASCII code point becomes a \\u escape, since
Ruby rejects raw multibyte chars in US-ASCII sources. Then " and # are escaped
so they close neither the literal nor open an interpolation.

ruby_quoted: body of a single-quoted Ruby literal (require names).
ruby_single_quoted: body of a single-quoted Ruby literal holding a filesystem path.
"""

from typing import Any

_BACKSLASH = 0x5C

_DOUBLE_QUOTED_ESCAPE = str.maketrans({'"': '\\"', "#": "\\#"})


def _escape_code_point(code: int) -> str:
    # \uXXXX covers the BMP; Ruby needs the braced form above it
    if code > 0xFFFF:
        return f"\\u{{{code:x}}}"
    return f"\\u{code:04x}"


def encode_content(content: str) -> str:
    """Encode content by code point: ASCII kept (backslash doubled), the rest \\u-escaped."""
    parts = []
    for ch in content:
        code = ord(ch)
        if code < 0x80:
            parts.append("\\\\" if code == _BACKSLASH else ch)
        else:
            parts.append(_escape_code_point(code))
    return "".join(parts)


def sass_content(value: Any) -> str:
    """Full double-quoted literal body: encode_content, then escape " and #."""
    return encode_content(str(value)).translate(_DOUBLE_QUOTED_ESCAPE)


def ruby_quoted(value: Any) -> str:
    """Body of a single-quoted literal: escape \\ and ' only."""
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


def ruby_single_quoted(value: Any) -> str:
    """
    Path for a single-quoted literal: backslashes become '/', then ' is escaped.
    Normalizing first keeps the escape backslash from being rewritten.
    """
    return str(value).replace("\\", "/").replace("'", "\\'")


SASS_FILTERS: dict[str, Any] = {
    "sass_content": sass_content,
    "ruby_quoted": ruby_quoted,
    "ruby_single_quoted": ruby_single_quoted,
}
