import os
import posixpath
import re
from pathlib import Path, PurePath
from typing import Union
from urllib.parse import quote, unquote, urlparse

from ..exceptions import MalformedUriError

_DRIVE_RE = re.compile(r"^/?([A-Za-z]):(/|$)")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")
_UNC_RE = re.compile(r"^//([^/]+)(/.*)?$")


def _normalize_path(path: str) -> str:
    path = path.replace("\\", "/")
    drive = _DRIVE_RE.match(path)
    if drive is not None:
        rest = path[drive.end() :]
        return f"/{drive.group(1).upper()}:" + posixpath.normpath("/" + rest)

    if not path.startswith("/"):
        path = os.path.abspath(path).replace("\\", "/")
        if _DRIVE_RE.match(path) is not None:
            return _normalize_path(path)
    # POSIX keeps a leading `//`, file URIs must not
    return "/" + posixpath.normpath(path).lstrip("/")


def path_to_uri(path: Union[str, PurePath]) -> str:
    """
    Build a `file://` URI from a filesystem path. Both `/` and `\\` are accepted
    as separators, so the result does not depend on the host platform.
    """
    unc = _UNC_RE.match(str(path).replace("\\", "/"))
    if unc is not None:
        # \\server\share becomes file://server/share
        share_path = "/" + posixpath.normpath(unc.group(2) or "/").lstrip("/")
        return "file://" + quote(unc.group(1)) + quote(share_path, safe="/")

    normalized = _normalize_path(str(path))
    drive = _DRIVE_RE.match(normalized)
    if drive is not None:
        prefix = normalized[: drive.end()].rstrip("/")
        return "file://" + prefix + quote(normalized[len(prefix) :], safe="/")
    return "file://" + quote(normalized, safe="/")


def uri_to_path(uri: str) -> Path:
    parsed = urlparse(parse_uri(uri))
    if parsed.scheme != "file":
        raise MalformedUriError(f"Not a file URI: {uri}")
    path = unquote(parsed.path)
    if parsed.netloc:
        # UNC path
        return Path(f"//{unquote(parsed.netloc)}{path}")
    drive = _DRIVE_RE.match(path)
    if drive is not None:
        path = path[1:]
    return Path(path)


def parse_uri(value: str) -> str:
    """
    Check that `value` is a scheme-qualified URI and return it unchanged.

    Raises:
        MalformedUriError: No scheme (a single letter followed by `:` is a
            Windows drive, not a scheme) or a `file` URI without a path.
    """
    if _SCHEME_RE.match(value) is None:
        raise MalformedUriError(f"URI has no scheme: {value!r}")
    try:
        parsed = urlparse(value)
    except ValueError as e:
        raise MalformedUriError(f"Malformed URI {value!r}: {e}") from None
    if parsed.scheme == "file" and not parsed.path and not parsed.netloc:
        raise MalformedUriError(f"File URI has no path: {value!r}")
    return value
