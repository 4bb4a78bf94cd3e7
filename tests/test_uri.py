from pathlib import PurePosixPath

import pytest
from pydantic import ValidationError

from lsproto.protocol import DecodeError, MalformedUriError, decode
from lsproto.protocol.common_structures import TextDocumentIdentifier
from lsproto.protocol.utils import parse_uri, path_to_uri, uri_to_path


@pytest.mark.parametrize(
    "path, uri",
    [
        ("/home/user/project/a.go", "file:///home/user/project/a.go"),
        ("/home/user/my project/a.go", "file:///home/user/my%20project/a.go"),
        ("/home/user/project/../b.go", "file:///home/user/b.go"),
        ("C:\\Users\\user\\a.go", "file:///C:/Users/user/a.go"),
        ("c:/Users/user/a.go", "file:///C:/Users/user/a.go"),
        (PurePosixPath("/tmp/x.txt"), "file:///tmp/x.txt"),
        ("\\\\server\\share\\f.txt", "file://server/share/f.txt"),
        ("//server/share/my dir/f.txt", "file://server/share/my%20dir/f.txt"),
    ],
)
def test_path_to_uri(path, uri):
    assert path_to_uri(path) == uri


def test_uri_to_path():
    assert uri_to_path("file:///home/user/my%20project/a.go").as_posix() == (
        "/home/user/my project/a.go"
    )
    assert uri_to_path("file:///C:/Users/user/a.go").as_posix() == "C:/Users/user/a.go"

    with pytest.raises(MalformedUriError):
        uri_to_path("https://example.com/a.go")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/home/user/project/a.go", "/home/user/project/a.go"),
        ("C:\\Users\\user\\a b.go", "C:/Users/user/a b.go"),
        ("\\\\server\\share\\f.txt", "//server/share/f.txt"),
        ("//server/share/f.txt", "//server/share/f.txt"),
    ],
)
def test_path_uri_round_trip(path, expected):
    assert uri_to_path(path_to_uri(path)).as_posix() == expected


@pytest.mark.parametrize(
    "uri",
    [
        "file:///path/to/basic.go",
        "untitled:Untitled-1",
        "https://code.visualstudio.com/",
    ],
)
def test_parse_uri_valid(uri):
    assert parse_uri(uri) == uri


@pytest.mark.parametrize("uri", ["", "path/to/basic.go", "C:/path/basic.go", "file://"])
def test_parse_uri_invalid(uri):
    with pytest.raises(MalformedUriError):
        parse_uri(uri)


def test_uri_field():
    assert TextDocumentIdentifier().uri == ""
    assert TextDocumentIdentifier(uri="file:///a.go").uri == "file:///a.go"

    with pytest.raises(ValidationError):
        TextDocumentIdentifier(uri="a.go")
    with pytest.raises(DecodeError):
        decode(b'{"uri":"a.go"}', TextDocumentIdentifier)
