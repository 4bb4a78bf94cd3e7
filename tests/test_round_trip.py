import pytest

from lsproto.cli.structures import protocol_structures
from lsproto.protocol import decode, encode
from lsproto.protocol.client_capabilities import ClientCapabilities
from lsproto.protocol.common_structures import (
    DocumentFilter,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    ProgressToken,
    Range,
    SymbolKind,
    TextDocumentIdentifier,
    VersionedTextDocumentIdentifier,
)
from lsproto.protocol.document_sync import (
    DidChangeTextDocumentParams,
    TextDocumentContentChangeEvent,
    TextDocumentSaveRegistrationOptions,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
)
from lsproto.protocol.features.code_action import CodeActionKind, CodeActionOptions
from lsproto.protocol.features.completion import (
    CompletionItem,
    CompletionItemKind,
    InsertReplaceEdit,
)
from lsproto.protocol.features.declaration import DeclarationRegistrationOptions
from lsproto.protocol.features.definition import DefinitionOptions
from lsproto.protocol.features.hover import Hover, HoverParams
from lsproto.protocol.features.references import ReferenceContext, ReferenceParams
from lsproto.protocol.features.semantic_tokens import (
    SemanticTokensFullOptions,
    SemanticTokensLegend,
    SemanticTokensRegistrationOptions,
)
from lsproto.protocol.general import (
    ClientInfo,
    InitializeParams,
    TraceValue,
    WorkDoneProgressBegin,
)
from lsproto.protocol.server_capabilities import (
    ServerCapabilities,
    ServerCapabilitiesWorkspace,
)
from lsproto.protocol.workspace import (
    WorkspaceFolder,
    WorkspaceFoldersServerCapabilities,
    WorkspaceSymbol,
)

STRUCTURES = protocol_structures()


def _range(sl: int, sc: int, el: int, ec: int) -> Range:
    return Range(
        start=Position(line=sl, character=sc), end=Position(line=el, character=ec)
    )


@pytest.mark.parametrize("structure", list(STRUCTURES.values()), ids=list(STRUCTURES))
def test_zero_value_round_trip(structure):
    value = structure()
    assert decode(encode(value), structure) == value


POPULATED = [
    ServerCapabilities(
        text_document_sync=TextDocumentSyncOptions(
            open_close=True, change=TextDocumentSyncKind.INCREMENTAL
        ),
        hover_provider=True,
        declaration_provider=DeclarationRegistrationOptions(
            document_selector=[DocumentFilter(language="go", scheme="file")],
            id="declaration",
        ),
        definition_provider=DefinitionOptions(work_done_progress=True),
        code_action_provider=CodeActionOptions(
            code_action_kinds=[CodeActionKind.QUICK_FIX], resolve_provider=True
        ),
        workspace=ServerCapabilitiesWorkspace(
            workspace_folders=WorkspaceFoldersServerCapabilities(
                supported=True, change_notifications="folders"
            )
        ),
        experimental={"x": [1, 2]},
    ),
    ServerCapabilities(
        text_document_sync=TextDocumentSyncKind.FULL,
        references_provider=False,
    ),
    SemanticTokensRegistrationOptions(
        document_selector=[DocumentFilter(pattern="**/*.go")],
        work_done_progress=True,
        legend=SemanticTokensLegend(
            token_types=["keyword", "type"], token_modifiers=["static"]
        ),
        range=True,
        full=SemanticTokensFullOptions(delta=True),
        id="tokens",
    ),
    TextDocumentSaveRegistrationOptions(
        document_selector=[DocumentFilter(language="go")], include_text=True
    ),
    InitializeParams(
        work_done_token=ProgressToken(3),
        process_id=42,
        client_info=ClientInfo(name="testClient", version="v0.0.0"),
        locale="en",
        root_path="/a",
        root_uri="file:///a",
        initialization_options={"opt": "v"},
        capabilities=ClientCapabilities(),
        trace=TraceValue.VERBOSE,
        workspace_folders=[WorkspaceFolder(uri="file:///a", name="a")],
    ),
    ReferenceParams(
        text_document=TextDocumentIdentifier(uri="file:///a.go"),
        position=Position(line=1, character=2),
        work_done_token=ProgressToken("work"),
        partial_result_token=ProgressToken(7),
        context=ReferenceContext(include_declaration=True),
    ),
    HoverParams(
        text_document=TextDocumentIdentifier(uri="file:///a.go"),
        position=Position(line=3, character=0),
        work_done_token=ProgressToken("hover"),
    ),
    Hover(
        contents=MarkupContent(kind=MarkupKind.MARKDOWN, value="**x**"),
        range=_range(3, 0, 3, 1),
    ),
    CompletionItem(
        label="f",
        kind=CompletionItemKind.FUNCTION,
        detail="func f()",
        documentation=MarkupContent(kind=MarkupKind.PLAINTEXT, value="doc"),
        text_edit=InsertReplaceEdit(
            new_text="f()", insert=_range(1, 1, 1, 2), replace=_range(1, 1, 1, 3)
        ),
        commit_characters=["("],
    ),
    DidChangeTextDocumentParams(
        text_document=VersionedTextDocumentIdentifier(uri="file:///a.go", version=2),
        content_changes=[
            TextDocumentContentChangeEvent(
                range=_range(0, 0, 0, 1), range_length=1, text="b"
            ),
            TextDocumentContentChangeEvent(text="package b\n"),
        ],
    ),
    WorkspaceSymbol(
        name="main",
        kind=SymbolKind.FUNCTION,
        container_name="a",
        location=Location(uri="file:///a.go", range=_range(0, 5, 0, 9)),
    ),
    WorkDoneProgressBegin(
        title="Indexing", cancellable=True, message="1/3", percentage=33
    ),
]


@pytest.mark.parametrize(
    "value", POPULATED, ids=[type(value).__name__ for value in POPULATED]
)
def test_populated_value_round_trip(value):
    decoded = decode(encode(value), type(value))
    assert decoded == value
    assert encode(decoded) == encode(value)
