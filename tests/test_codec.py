from typing import List

import pytest
from pydantic import ValidationError

from lsproto.protocol import (
    DecodeError,
    Embedded,
    LspModel,
    decode,
    decode_object,
    encode,
    encode_str,
)
from lsproto.protocol.common_structures import (
    OptionalVersionedTextDocumentIdentifier,
    Position,
    ProgressToken,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    VersionedTextDocumentIdentifier,
)
from lsproto.protocol.features.formatting import FormattingOptions
from lsproto.protocol.features.hover import Hover, HoverParams, MarkedString
from lsproto.protocol.general import ClientInfo, InitializeParams
from lsproto.protocol.workspace import WorkspaceFolder


def test_encode_compact_bytes():
    info = ClientInfo(name="testClient", version="v0.0.0")
    assert encode(info) == b'{"name":"testClient","version":"v0.0.0"}'
    assert encode_str(info) == '{"name":"testClient","version":"v0.0.0"}'


def test_optional_omitted_required_written():
    assert encode_str(ClientInfo(name="testClient")) == '{"name":"testClient"}'
    assert encode_str(ClientInfo()) == '{"name":""}'
    assert encode_str(Position()) == '{"line":0,"character":0}'


def test_nullable_written_as_null():
    assert encode_str(TextDocumentRegistrationOptions(document_selector=None)) == (
        '{"documentSelector":null}'
    )
    assert encode_str(TextDocumentRegistrationOptions()) == '{"documentSelector":[]}'

    decoded = decode(b'{"documentSelector":null}', TextDocumentRegistrationOptions)
    assert decoded.document_selector is None


def test_embedded_flattened():
    identifier = VersionedTextDocumentIdentifier(
        text_document_identifier=TextDocumentIdentifier(uri="file:///a.go"),
        version=3,
    )
    assert encode_str(identifier) == '{"uri":"file:///a.go","version":3}'
    assert identifier.uri == "file:///a.go"

    flat = VersionedTextDocumentIdentifier(uri="file:///a.go", version=3)
    assert flat == identifier
    assert decode(encode(identifier), VersionedTextDocumentIdentifier) == identifier

    unversioned = OptionalVersionedTextDocumentIdentifier(uri="file:///a.go")
    assert encode_str(unversioned) == '{"uri":"file:///a.go","version":null}'


def test_embedded_attribute_errors():
    params = HoverParams(
        text_document={"uri": "file:///a.go"}, position={"line": 1, "character": 2}
    )
    assert params.position == Position(line=1, character=2)
    assert params.work_done_token is None
    with pytest.raises(AttributeError):
        params.does_not_exist


def test_unknown_keys_ignored():
    decoded = decode(
        b'{"name":"testClient","version":"v0.0.0","somethingElse":[1,2,3]}',
        ClientInfo,
    )
    assert decoded == ClientInfo(name="testClient", version="v0.0.0")
    assert encode_str(decoded) == '{"name":"testClient","version":"v0.0.0"}'


def test_missing_required_takes_zero_value():
    assert decode(b"{}", Position) == Position(line=0, character=0)


@pytest.mark.parametrize(
    "data",
    [
        b'{"line":"1","character":0}',
        b'{"line":1.5,"character":0}',
        b'{"line":true,"character":0}',
        b'{"name":1}',
        b"[]",
        b"not json",
        b'{"line":1,',
    ],
)
def test_decode_errors(data):
    target = ClientInfo if b"name" in data else Position
    with pytest.raises(DecodeError) as e:
        decode(data, target)
    assert e.value.target is target
    assert len(e.value.errors) > 0
    assert isinstance(e.value, ValueError)


def test_decode_null_optional():
    assert decode(b'{"name":"x","version":null}', ClientInfo) == ClientInfo(name="x")


def test_nullable_type_mismatch():
    with pytest.raises(DecodeError):
        decode(
            b'{"processId":"abc","rootUri":null,"capabilities":{}}',
            InitializeParams,
        )


def test_decode_typing_forms():
    folders = decode(
        b'[{"uri":"file:///a","name":"a"},{"uri":"file:///b","name":"b"}]',
        List[WorkspaceFolder],
    )
    assert folders == [
        WorkspaceFolder(uri="file:///a", name="a"),
        WorkspaceFolder(uri="file:///b", name="b"),
    ]
    assert encode_str(folders) == (
        '[{"uri":"file:///a","name":"a"},{"uri":"file:///b","name":"b"}]'
    )

    with pytest.raises(DecodeError):
        decode(b'{"uri":"file:///a","name":"a"}', List[WorkspaceFolder])


def test_decode_object():
    assert decode_object({"line": 3, "character": 1}, Position) == Position(
        line=3, character=1
    )
    assert decode_object([{"name": "x"}], List[ClientInfo]) == [ClientInfo(name="x")]
    with pytest.raises(DecodeError):
        decode_object({"line": "3"}, Position)


def test_frozen():
    position = Position(line=1, character=2)
    with pytest.raises(ValidationError):
        position.line = 3
    assert position.model_copy(update={"line": 3}).line == 3
    assert len({position, Position(line=1, character=2)}) == 1


def test_progress_token_kind_preserved():
    assert ProgressToken(1) != ProgressToken("1")
    assert encode_str(ProgressToken(1)) == "1"
    assert encode_str(ProgressToken("1")) == '"1"'
    assert str(ProgressToken(42)) == "42"

    params = decode(
        b'{"textDocument":{"uri":"file:///a"},"position":{"line":0,"character":0},'
        b'"workDoneToken":7}',
        HoverParams,
    )
    assert params.work_done_token == ProgressToken(7)
    with pytest.raises(DecodeError):
        decode(b'{"workDoneToken":true}', HoverParams)


def test_variant_resolution():
    markup = decode(b'{"contents":{"kind":"markdown","value":"# x"}}', Hover)
    assert markup.contents.kind == "markdown"

    marked = decode(b'{"contents":{"language":"go","value":"x"}}', Hover)
    assert marked.contents == MarkedString(language="go", value="x")

    mixed = decode(b'{"contents":["text",{"language":"go","value":"x"}]}', Hover)
    assert mixed.contents == ["text", MarkedString(language="go", value="x")]
    assert encode_str(mixed) == '{"contents":["text",{"language":"go","value":"x"}]}'

    plain = decode(b'{"contents":"text"}', Hover)
    assert plain.contents == "text"


def test_extra_keys_kept():
    options = decode(
        b'{"tabSize":4,"insertSpaces":true,"editor.rulers":[80]}', FormattingOptions
    )
    assert options.tab_size == 4
    assert encode_str(options) == (
        '{"tabSize":4,"insertSpaces":true,"editor.rulers":[80]}'
    )


def test_only_models_embed():
    with pytest.raises(TypeError):

        class Broken(LspModel):
            value: Embedded[int]
