"""
HTTP helpers for serving processed resources: cache-header dates, location
splitting, prefix checks and Accept-Encoding inspection.

None of these are used by the Sass engine; they are consumed by the serving layer.
"""

import re
from email.utils import formatdate

from starlette.requests import Request

# Blank line (tabs/spaces only) together with its line terminator
EMPTY_LINE_PATTERN = re.compile(r"^[\t ]*\r?\n", re.MULTILINE)


def to_date_as_string(milliseconds: int) -> str:
    """Epoch milliseconds -> response header date, e.g. 'Sat, 10 Apr 2010 17:31:31 GMT'."""
    return formatdate(milliseconds / 1000.0, usegmt=True)


def get_path_info_from_location(location: str | None) -> str:
    """
    Path info of a location: skip the first character, then everything from the next '/'.
    '/app/wro/all.css' -> '/wro/all.css'; '/app' -> ''.
    """
    if not location:
        raise ValueError("Location cannot be empty string!")
    no_slash = location[1:]
    next_slash = no_slash.find("/")
    if next_slash == -1:
        return ""
    return no_slash[next_slash:]


def get_servlet_path_from_location(location: str) -> str:
    """Location with its path info removed: '/app/wro/all.css' -> '/app'."""
    return location.replace(get_path_info_from_location(location), "")


def get_folder_of_uri(uri: str | None) -> str | None:
    """
    Folder part of a uri, up to and including the last separator: /app/wro/all.css -> /app/wro/.
    A bare drive prefix is kept: 'C:' -> 'C:', 'C:a.css' -> 'C:'.
    """
    if uri is None:
        return None
    idx = max(uri.rfind("/"), uri.rfind("\\"))
    if idx == -1 and len(uri) >= 2 and uri[1] == ":" and uri[0].isalpha():
        return uri[:2]
    return uri[: idx + 1]


def starts_with_ignore_case(s: str | None, prefix: str | None) -> bool:
    """
    Case-insensitive prefix check. Two None are equal; a single None never matches.

    starts_with_ignore_case("abcdef", "ABC") -> True
    starts_with_ignore_case(None, "abc")     -> False
    """
    if s is None or prefix is None:
        return s is None and prefix is None
    if len(prefix) > len(s):
        return False
    return s[: len(prefix)].lower() == prefix.lower()


def to_package_as_folder(cls: type | None) -> str:
    """Package of a class as a folder path: pkg.sub.Mod -> 'pkg/sub'."""
    if cls is None:
        raise ValueError("Class cannot be null!")
    package = cls.__module__.rpartition(".")[0]
    return package.replace(".", "/")


def header_contains(request: Request, header: str, value: str) -> bool:
    """True if any value of a (possibly repeated) header contains value."""
    return any(value in v for v in request.headers.getlist(header))


def is_gzip_supported(request: Request) -> bool:
    """True if the client accepts gzip content encoding."""
    return header_contains(request, "accept-encoding", "gzip")
