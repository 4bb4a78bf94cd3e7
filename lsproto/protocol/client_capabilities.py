from typing import Any, List, Optional

from pydantic import Field, StrictBool, StrictStr

from .common_structures import (
    MarkdownClientCapabilities,
    RegularExpressionsClientCapabilities,
)
from .document_sync import TextDocumentSyncClientCapabilities
from .features.call_hierarchy import CallHierarchyClientCapabilities
from .features.code_action import CodeActionClientCapabilities
from .features.code_lens import (
    CodeLensClientCapabilities,
    CodeLensWorkspaceClientCapabilities,
)
from .features.completion import CompletionClientCapabilities
from .features.declaration import DeclarationClientCapabilities
from .features.definition import DefinitionClientCapabilities
from .features.diagnostic import PublishDiagnosticsClientCapabilities
from .features.document_color import DocumentColorClientCapabilities
from .features.document_highlight import DocumentHighlightClientCapabilities
from .features.document_link import DocumentLinkClientCapabilities
from .features.document_symbol import DocumentSymbolClientCapabilities
from .features.folding_range import FoldingRangeClientCapabilities
from .features.formatting import (
    DocumentFormattingClientCapabilities,
    DocumentOnTypeFormattingClientCapabilities,
    DocumentRangeFormattingClientCapabilities,
)
from .features.hover import HoverClientCapabilities
from .features.implementation import ImplementationClientCapabilities
from .features.linked_editing_range import LinkedEditingRangeClientCapabilities
from .features.moniker import MonikerClientCapabilities
from .features.references import ReferenceClientCapabilities
from .features.rename import RenameClientCapabilities
from .features.selection_range import SelectionRangeClientCapabilities
from .features.semantic_tokens import (
    SemanticTokensClientCapabilities,
    SemanticTokensWorkspaceClientCapabilities,
)
from .features.signature_help import SignatureHelpClientCapabilities
from .features.type_definition import TypeDefinitionClientCapabilities
from .features.type_hierarchy import TypeHierarchyClientCapabilities
from .lsp_data_model import LspModel
from .server_capabilities import PositionEncodingKind
from .window import ShowDocumentClientCapabilities, ShowMessageRequestClientCapabilities
from .workspace import (
    DidChangeConfigurationClientCapabilities,
    DidChangeWatchedFilesClientCapabilities,
    ExecuteCommandClientCapabilities,
    FileOperationClientCapabilities,
    WorkspaceEditClientCapabilities,
    WorkspaceSymbolClientCapabilities,
)


class WorkspaceClientCapabilities(LspModel):
    apply_edit: Optional[StrictBool] = None
    """
    The client supports applying batch edits
    to the workspace by supporting the request
    'workspace/applyEdit'
    """
    workspace_edit: Optional[WorkspaceEditClientCapabilities] = None
    did_change_configuration: Optional[DidChangeConfigurationClientCapabilities] = None
    did_change_watched_files: Optional[DidChangeWatchedFilesClientCapabilities] = None
    symbol: Optional[WorkspaceSymbolClientCapabilities] = None
    execute_command: Optional[ExecuteCommandClientCapabilities] = None
    workspace_folders: Optional[StrictBool] = None
    configuration: Optional[StrictBool] = None
    semantic_tokens: Optional[SemanticTokensWorkspaceClientCapabilities] = None
    code_lens: Optional[CodeLensWorkspaceClientCapabilities] = None
    file_operations: Optional[FileOperationClientCapabilities] = None
    """
    The client has support for file requests/notifications.
    """


class TextDocumentClientCapabilities(LspModel):
    synchronization: Optional[TextDocumentSyncClientCapabilities] = None
    completion: Optional[CompletionClientCapabilities] = None
    hover: Optional[HoverClientCapabilities] = None
    signature_help: Optional[SignatureHelpClientCapabilities] = None
    declaration: Optional[DeclarationClientCapabilities] = None
    definition: Optional[DefinitionClientCapabilities] = None
    type_definition: Optional[TypeDefinitionClientCapabilities] = None
    implementation: Optional[ImplementationClientCapabilities] = None
    references: Optional[ReferenceClientCapabilities] = None
    document_highlight: Optional[DocumentHighlightClientCapabilities] = None
    document_symbol: Optional[DocumentSymbolClientCapabilities] = None
    code_action: Optional[CodeActionClientCapabilities] = None
    code_lens: Optional[CodeLensClientCapabilities] = None
    document_link: Optional[DocumentLinkClientCapabilities] = None
    color_provider: Optional[DocumentColorClientCapabilities] = None
    formatting: Optional[DocumentFormattingClientCapabilities] = None
    range_formatting: Optional[DocumentRangeFormattingClientCapabilities] = None
    on_type_formatting: Optional[DocumentOnTypeFormattingClientCapabilities] = None
    rename: Optional[RenameClientCapabilities] = None
    publish_diagnostics: Optional[PublishDiagnosticsClientCapabilities] = None
    folding_range: Optional[FoldingRangeClientCapabilities] = None
    selection_range: Optional[SelectionRangeClientCapabilities] = None
    linked_editing_range: Optional[LinkedEditingRangeClientCapabilities] = None
    call_hierarchy: Optional[CallHierarchyClientCapabilities] = None
    semantic_tokens: Optional[SemanticTokensClientCapabilities] = None
    moniker: Optional[MonikerClientCapabilities] = None
    type_hierarchy: Optional[TypeHierarchyClientCapabilities] = None


class WindowClientCapabilities(LspModel):
    work_done_progress: Optional[StrictBool] = None
    """
    It indicates whether the client supports server initiated
    progress using the `window/workDoneProgress/create` request.
    """
    show_message: Optional[ShowMessageRequestClientCapabilities] = None
    show_document: Optional[ShowDocumentClientCapabilities] = None


class StaleRequestSupportClientCapabilities(LspModel):
    cancel: StrictBool = False
    retry_on_content_modified: List[StrictStr] = Field(default_factory=list)
    """
    The list of requests for which the client
    will retry the request if it receives a
    response with error code `ContentModified`
    """


class GeneralClientCapabilities(LspModel):
    stale_request_support: Optional[StaleRequestSupportClientCapabilities] = None
    regular_expressions: Optional[RegularExpressionsClientCapabilities] = None
    markdown: Optional[MarkdownClientCapabilities] = None
    position_encodings: Optional[List[PositionEncodingKind]] = None
    """
    The position encodings supported by the client. Client and server
    have to agree on the same position encoding to ensure that offsets
    (e.g. character position in a line) are interpreted the same on both
    side.
    """


class ClientCapabilities(LspModel):
    workspace: Optional[WorkspaceClientCapabilities] = None
    """
    Workspace specific client capabilities.
    """
    text_document: Optional[TextDocumentClientCapabilities] = None
    """
    Text document specific client capabilities.
    """
    window: Optional[WindowClientCapabilities] = None
    general: Optional[GeneralClientCapabilities] = None
    experimental: Optional[Any] = None
    """
    Experimental client capabilities.
    """
