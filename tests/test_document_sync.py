import pytest

from lsproto.protocol import DecodeError, decode, encode_str
from lsproto.protocol.common_structures import (
    DocumentFilter,
    Position,
    Range,
    TextDocumentItem,
)
from lsproto.protocol.document_sync import (
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    SaveOptions,
    TextDocumentChangeRegistrationOptions,
    TextDocumentContentChangeEvent,
    TextDocumentSaveReason,
    TextDocumentSaveRegistrationOptions,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
    WillSaveTextDocumentParams,
)


def test_sync_options():
    options = TextDocumentSyncOptions(
        open_close=True,
        change=TextDocumentSyncKind.FULL,
        will_save=True,
        will_save_wait_until=True,
        save=SaveOptions(include_text=True),
    )
    data = (
        '{"openClose":true,"change":1,"willSave":true,"willSaveWaitUntil":true,'
        '"save":{"includeText":true}}'
    )
    assert encode_str(options) == data
    assert decode(data, TextDocumentSyncOptions) == options


def test_sync_options_save_flag():
    options = decode(b'{"save":false}', TextDocumentSyncOptions)
    assert options.save is False
    assert encode_str(options) == '{"save":false}'

    with pytest.raises(DecodeError):
        decode(b'{"save":"yes"}', TextDocumentSyncOptions)


def test_did_open():
    params = DidOpenTextDocumentParams(
        text_document=TextDocumentItem(
            uri="file:///a.go", language_id="go", version=1, text="package a\n"
        )
    )
    data = (
        '{"textDocument":{"uri":"file:///a.go","languageId":"go","version":1,'
        '"text":"package a\\n"}}'
    )
    assert encode_str(params) == data
    assert decode(data, DidOpenTextDocumentParams) == params


def test_did_change():
    data = (
        '{"textDocument":{"uri":"file:///a.go","version":2},"contentChanges":['
        '{"range":{"start":{"line":0,"character":8},"end":{"line":0,"character":9}},'
        '"rangeLength":1,"text":"b"},'
        '{"text":"package b\\n"}]}'
    )
    params = decode(data, DidChangeTextDocumentParams)
    assert params.text_document.uri == "file:///a.go"
    assert params.text_document.version == 2

    incremental, full = params.content_changes
    assert incremental.range == Range(
        start=Position(line=0, character=8), end=Position(line=0, character=9)
    )
    assert incremental.range_length == 1
    assert full == TextDocumentContentChangeEvent(text="package b\n")
    assert full.range is None

    assert encode_str(params) == data


def test_will_save():
    params = decode(
        b'{"textDocument":{"uri":"file:///a.go"},"reason":2}',
        WillSaveTextDocumentParams,
    )
    assert params.reason is TextDocumentSaveReason.AFTER_DELAY
    assert str(params.reason) == "AfterDelay"


def test_did_save():
    params = DidSaveTextDocumentParams(
        text_document={"uri": "file:///a.go"}, text="package a\n"
    )
    assert encode_str(params) == (
        '{"textDocument":{"uri":"file:///a.go"},"text":"package a\\n"}'
    )
    unsaved = DidSaveTextDocumentParams(text_document={"uri": "file:///a.go"})
    assert encode_str(unsaved) == '{"textDocument":{"uri":"file:///a.go"}}'


def test_registration_options():
    change = TextDocumentChangeRegistrationOptions(
        document_selector=[DocumentFilter(language="go")],
        sync_kind=TextDocumentSyncKind.INCREMENTAL,
    )
    data = '{"documentSelector":[{"language":"go"}],"syncKind":2}'
    assert encode_str(change) == data
    assert decode(data, TextDocumentChangeRegistrationOptions) == change

    save = decode(
        b'{"documentSelector":null,"includeText":true}',
        TextDocumentSaveRegistrationOptions,
    )
    assert save.document_selector is None
    assert save.include_text is True
    assert encode_str(save) == '{"documentSelector":null,"includeText":true}'
