import pytest

from lsproto.protocol import DecodeError, decode, encode_str
from lsproto.protocol.common_structures import DocumentFilter
from lsproto.protocol.document_sync import (
    SaveOptions,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
)
from lsproto.protocol.features.code_action import CodeActionKind, CodeActionOptions
from lsproto.protocol.features.completion import CompletionOptions
from lsproto.protocol.features.declaration import (
    DeclarationOptions,
    DeclarationRegistrationOptions,
)
from lsproto.protocol.features.semantic_tokens import (
    SemanticTokensLegend,
    SemanticTokensOptions,
)
from lsproto.protocol.general import InitializeResult, ServerInfo
from lsproto.protocol.server_capabilities import (
    PositionEncodingKind,
    ProviderKind,
    ServerCapabilities,
    ServerCapabilitiesWorkspace,
    provider_kind,
)
from lsproto.protocol.workspace import (
    ExecuteCommandOptions,
    WorkspaceFoldersServerCapabilities,
)

GO_SELECTOR = [DocumentFilter(language="go", scheme="file", pattern="*")]


def test_initialize_result():
    result = InitializeResult(
        capabilities=ServerCapabilities(
            position_encoding=PositionEncodingKind.UTF16,
            text_document_sync=TextDocumentSyncOptions(
                open_close=True,
                change=TextDocumentSyncKind.FULL,
                will_save=True,
                will_save_wait_until=True,
                save=SaveOptions(include_text=True),
            ),
            hover_provider=True,
            completion_provider=CompletionOptions(
                resolve_provider=True, trigger_characters=["."]
            ),
            declaration_provider=DeclarationRegistrationOptions(
                work_done_progress=True, document_selector=GO_SELECTOR, id="1"
            ),
            definition_provider=False,
            code_action_provider=CodeActionOptions(
                code_action_kinds=[CodeActionKind.QUICK_FIX, CodeActionKind.REFACTOR]
            ),
            execute_command_provider=ExecuteCommandOptions(
                commands=["test", "command"]
            ),
            workspace=ServerCapabilitiesWorkspace(
                workspace_folders=WorkspaceFoldersServerCapabilities(
                    supported=True, change_notifications="testNotifications"
                )
            ),
        ),
        server_info=ServerInfo(name="testServer", version="v0.0.0"),
    )
    data = (
        '{"capabilities":{'
        '"positionEncoding":"utf-16",'
        '"textDocumentSync":{"openClose":true,"change":1,"willSave":true,'
        '"willSaveWaitUntil":true,"save":{"includeText":true}},'
        '"hoverProvider":true,'
        '"completionProvider":{"resolveProvider":true,"triggerCharacters":["."]},'
        '"declarationProvider":{"workDoneProgress":true,'
        '"documentSelector":[{"language":"go","scheme":"file","pattern":"*"}],'
        '"id":"1"},'
        '"definitionProvider":false,'
        '"codeActionProvider":{"codeActionKinds":["quickfix","refactor"]},'
        '"executeCommandProvider":{"commands":["test","command"]},'
        '"workspace":{"workspaceFolders":{"supported":true,'
        '"changeNotifications":"testNotifications"}}},'
        '"serverInfo":{"name":"testServer","version":"v0.0.0"}}'
    )
    assert encode_str(result) == data

    decoded = decode(data, InitializeResult)
    assert decoded == result
    assert decoded.capabilities.hover_provider is True
    assert decoded.capabilities.definition_provider is False
    assert decoded.capabilities.workspace.workspace_folders.change_notifications == (
        "testNotifications"
    )


def test_empty_capabilities():
    assert encode_str(InitializeResult()) == '{"capabilities":{}}'
    assert decode(b"{}", InitializeResult) == InitializeResult()


@pytest.mark.parametrize(
    "data, kind",
    [
        (b'{"declarationProvider":true}', ProviderKind.FLAG),
        (b'{"declarationProvider":false}', ProviderKind.FLAG),
        (b'{"declarationProvider":{}}', ProviderKind.OPTIONS),
        (b'{"declarationProvider":{"workDoneProgress":true}}', ProviderKind.OPTIONS),
        (b'{"declarationProvider":{"id":"decl"}}', ProviderKind.REGISTRATION),
        (
            b'{"declarationProvider":{"documentSelector":[{"language":"go"}]}}',
            ProviderKind.REGISTRATION,
        ),
        (
            b'{"declarationProvider":{"documentSelector":null}}',
            ProviderKind.REGISTRATION,
        ),
        (b"{}", None),
    ],
)
def test_provider_kind(data, kind):
    capabilities = decode(data, ServerCapabilities)
    assert provider_kind(capabilities.declaration_provider) is kind


def test_provider_values_keep_their_variant():
    capabilities = decode(
        b'{"declarationProvider":{"workDoneProgress":true},'
        b'"typeDefinitionProvider":{"id":"t"},'
        b'"referencesProvider":true}',
        ServerCapabilities,
    )
    assert type(capabilities.declaration_provider) is DeclarationOptions
    assert capabilities.declaration_provider.work_done_progress is True
    assert provider_kind(capabilities.type_definition_provider) is (
        ProviderKind.REGISTRATION
    )
    assert capabilities.type_definition_provider.document_selector == []
    assert capabilities.references_provider is True

    # a boolean stays a boolean, it is never turned into an options object
    assert encode_str(capabilities) == (
        '{"declarationProvider":{"workDoneProgress":true},'
        '"typeDefinitionProvider":{"documentSelector":[],"id":"t"},'
        '"referencesProvider":true}'
    )


def test_text_document_sync_kind_or_options():
    capabilities = decode(b'{"textDocumentSync":2}', ServerCapabilities)
    assert capabilities.text_document_sync is TextDocumentSyncKind.INCREMENTAL
    assert encode_str(capabilities) == '{"textDocumentSync":2}'

    capabilities = decode(b'{"textDocumentSync":{"save":true}}', ServerCapabilities)
    assert capabilities.text_document_sync == TextDocumentSyncOptions(save=True)


def test_semantic_tokens_provider():
    capabilities = ServerCapabilities(
        semantic_tokens_provider=SemanticTokensOptions(
            legend=SemanticTokensLegend(token_types=["keyword"], token_modifiers=[]),
            full=True,
        )
    )
    data = (
        '{"semanticTokensProvider":{"legend":{"tokenTypes":["keyword"],'
        '"tokenModifiers":[]},"full":true}}'
    )
    assert encode_str(capabilities) == data
    assert decode(data, ServerCapabilities) == capabilities
    assert provider_kind(capabilities.semantic_tokens_provider) is ProviderKind.OPTIONS

    # no flag form for semantic tokens
    with pytest.raises(DecodeError):
        decode(b'{"semanticTokensProvider":true}', ServerCapabilities)


def test_provider_type_mismatch():
    with pytest.raises(DecodeError):
        decode(b'{"hoverProvider":"yes"}', ServerCapabilities)
    with pytest.raises(DecodeError):
        decode(b'{"hoverProvider":1}', ServerCapabilities)
