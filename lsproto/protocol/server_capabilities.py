from typing import Any, Optional, Type, Union

from lsproto.utils import StrEnum

from .common_structures import (
    StaticRegistrationOptions,
    TextDocumentRegistrationOptions,
)
from .document_sync import TextDocumentSyncKind, TextDocumentSyncOptions
from .features.call_hierarchy import (
    CallHierarchyOptions,
    CallHierarchyRegistrationOptions,
)
from .features.code_action import CodeActionOptions
from .features.code_lens import CodeLensOptions
from .features.completion import CompletionOptions
from .features.declaration import DeclarationOptions, DeclarationRegistrationOptions
from .features.definition import DefinitionOptions
from .features.document_color import (
    DocumentColorOptions,
    DocumentColorRegistrationOptions,
)
from .features.document_highlight import DocumentHighlightOptions
from .features.document_link import DocumentLinkOptions
from .features.document_symbol import DocumentSymbolOptions
from .features.folding_range import (
    FoldingRangeOptions,
    FoldingRangeRegistrationOptions,
)
from .features.formatting import (
    DocumentFormattingOptions,
    DocumentOnTypeFormattingOptions,
    DocumentRangeFormattingOptions,
)
from .features.hover import HoverOptions
from .features.implementation import (
    ImplementationOptions,
    ImplementationRegistrationOptions,
)
from .features.linked_editing_range import (
    LinkedEditingRangeOptions,
    LinkedEditingRangeRegistrationOptions,
)
from .features.moniker import MonikerOptions, MonikerRegistrationOptions
from .features.references import ReferenceOptions
from .features.rename import RenameOptions
from .features.selection_range import (
    SelectionRangeOptions,
    SelectionRangeRegistrationOptions,
)
from .features.semantic_tokens import (
    SemanticTokensOptions,
    SemanticTokensRegistrationOptions,
)
from .features.signature_help import SignatureHelpOptions
from .features.type_definition import (
    TypeDefinitionOptions,
    TypeDefinitionRegistrationOptions,
)
from .features.type_hierarchy import (
    TypeHierarchyOptions,
    TypeHierarchyRegistrationOptions,
)
from .lsp_data_model import LspModel, variant
from .workspace import (
    ExecuteCommandOptions,
    FileOperationRegistrationOptions,
    WorkspaceFoldersServerCapabilities,
    WorkspaceSymbolOptions,
)


class PositionEncodingKind(StrEnum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"


class ProviderKind(StrEnum):
    FLAG = "flag"
    OPTIONS = "options"
    REGISTRATION = "registration"


def provider_variant(
    options: Type[LspModel],
    registration: Optional[Type[LspModel]] = None,
    flag: bool = True,
) -> Any:
    """
    Type of a `*Provider` server capability: a JSON boolean (when `flag` is
    set), the feature's options object or its registration options object.
    An object is read as registration options when it carries a key only the
    registration options know about, such as `documentSelector` or `id`.
    """
    choices = [options] if registration is None else [registration, options]
    if len(choices) == 1 and not flag:
        return options
    return variant(*choices, flag=flag)


def _is_registration(value: LspModel) -> bool:
    return any(
        issubclass(block, (TextDocumentRegistrationOptions, StaticRegistrationOptions))
        for block in type(value).__lsp_embedded__.values()
    )


def provider_kind(value: Union[bool, LspModel, None]) -> Optional[ProviderKind]:
    """
    Report which variant a provider capability holds, `None` when the
    capability is absent.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return ProviderKind.FLAG
    if _is_registration(value):
        return ProviderKind.REGISTRATION
    return ProviderKind.OPTIONS


class ServerCapabilitiesWorkspaceFileOperations(LspModel):
    did_create: Optional[FileOperationRegistrationOptions] = None
    """
    The server is interested in receiving didCreateFiles
    notifications.
    """
    will_create: Optional[FileOperationRegistrationOptions] = None
    did_rename: Optional[FileOperationRegistrationOptions] = None
    will_rename: Optional[FileOperationRegistrationOptions] = None
    did_delete: Optional[FileOperationRegistrationOptions] = None
    will_delete: Optional[FileOperationRegistrationOptions] = None


class ServerCapabilitiesWorkspace(LspModel):
    workspace_folders: Optional[WorkspaceFoldersServerCapabilities] = None
    """
    The server supports workspace folder.
    """
    file_operations: Optional[ServerCapabilitiesWorkspaceFileOperations] = None
    """
    The server is interested in file notifications/requests.
    """


class ServerCapabilities(LspModel):
    position_encoding: Optional[PositionEncodingKind] = None
    """
    The position encoding the server picked from the encodings offered
    by the client via the client capability `general.positionEncodings`.
    """
    text_document_sync: Optional[
        Union[TextDocumentSyncKind, TextDocumentSyncOptions]
    ] = None
    """
    Defines how text documents are synced. Is either a detailed structure
    defining each notification or for backwards compatibility the
    TextDocumentSyncKind number.
    """
    hover_provider: Optional[provider_variant(HoverOptions)] = None
    completion_provider: Optional[CompletionOptions] = None
    signature_help_provider: Optional[SignatureHelpOptions] = None
    declaration_provider: Optional[
        provider_variant(DeclarationOptions, DeclarationRegistrationOptions)
    ] = None
    definition_provider: Optional[provider_variant(DefinitionOptions)] = None
    type_definition_provider: Optional[
        provider_variant(TypeDefinitionOptions, TypeDefinitionRegistrationOptions)
    ] = None
    implementation_provider: Optional[
        provider_variant(ImplementationOptions, ImplementationRegistrationOptions)
    ] = None
    references_provider: Optional[provider_variant(ReferenceOptions)] = None
    document_highlight_provider: Optional[
        provider_variant(DocumentHighlightOptions)
    ] = None
    document_symbol_provider: Optional[provider_variant(DocumentSymbolOptions)] = None
    workspace_symbol_provider: Optional[
        provider_variant(WorkspaceSymbolOptions)
    ] = None
    code_action_provider: Optional[provider_variant(CodeActionOptions)] = None
    """
    The server provides code actions. The `CodeActionOptions` return type is
    only valid if the client signals code action literal support via the
    property `textDocument.codeAction.codeActionLiteralSupport`.
    """
    code_lens_provider: Optional[CodeLensOptions] = None
    document_formatting_provider: Optional[
        provider_variant(DocumentFormattingOptions)
    ] = None
    document_range_formatting_provider: Optional[
        provider_variant(DocumentRangeFormattingOptions)
    ] = None
    document_on_type_formatting_provider: Optional[
        DocumentOnTypeFormattingOptions
    ] = None
    rename_provider: Optional[provider_variant(RenameOptions)] = None
    """
    The server provides rename support. RenameOptions may only be
    specified if the client states that it supports
    `prepareSupport` in its initial `initialize` request.
    """
    document_link_provider: Optional[DocumentLinkOptions] = None
    color_provider: Optional[
        provider_variant(DocumentColorOptions, DocumentColorRegistrationOptions)
    ] = None
    folding_range_provider: Optional[
        provider_variant(FoldingRangeOptions, FoldingRangeRegistrationOptions)
    ] = None
    selection_range_provider: Optional[
        provider_variant(SelectionRangeOptions, SelectionRangeRegistrationOptions)
    ] = None
    execute_command_provider: Optional[ExecuteCommandOptions] = None
    workspace: Optional[ServerCapabilitiesWorkspace] = None
    """
    Workspace specific server capabilities
    """
    linked_editing_range_provider: Optional[
        provider_variant(
            LinkedEditingRangeOptions, LinkedEditingRangeRegistrationOptions
        )
    ] = None
    call_hierarchy_provider: Optional[
        provider_variant(CallHierarchyOptions, CallHierarchyRegistrationOptions)
    ] = None
    semantic_tokens_provider: Optional[
        provider_variant(
            SemanticTokensOptions, SemanticTokensRegistrationOptions, flag=False
        )
    ] = None
    moniker_provider: Optional[
        provider_variant(MonikerOptions, MonikerRegistrationOptions)
    ] = None
    type_hierarchy_provider: Optional[
        provider_variant(TypeHierarchyOptions, TypeHierarchyRegistrationOptions)
    ] = None
    experimental: Optional[Any] = None
    """
    Experimental server capabilities.
    """
