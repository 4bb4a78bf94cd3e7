import enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type, Union

from lsproto.core import get_logger

from .codec import decode_object
from .document_sync import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    WillSaveTextDocumentParams,
)
from .exceptions import UnknownMethodError
from .features.call_hierarchy import (
    CallHierarchyIncomingCallsParams,
    CallHierarchyOutgoingCallsParams,
    CallHierarchyPrepareParams,
)
from .features.code_action import CodeAction, CodeActionParams
from .features.code_lens import CodeLens, CodeLensParams
from .features.completion import CompletionItem, CompletionParams
from .features.declaration import DeclarationParams
from .features.definition import DefinitionParams
from .features.diagnostic import PublishDiagnosticsParams
from .features.document_color import ColorPresentationParams, DocumentColorParams
from .features.document_highlight import DocumentHighlightParams
from .features.document_link import DocumentLink, DocumentLinkParams
from .features.document_symbol import DocumentSymbolParams
from .features.folding_range import FoldingRangeParams
from .features.formatting import (
    DocumentFormattingParams,
    DocumentOnTypeFormattingParams,
    DocumentRangeFormattingParams,
)
from .features.hover import HoverParams
from .features.implementation import ImplementationParams
from .features.linked_editing_range import LinkedEditingRangeParams
from .features.moniker import MonikerParams
from .features.references import ReferenceParams
from .features.rename import PrepareRenameParams, RenameParams
from .features.selection_range import SelectionRangeParams
from .features.semantic_tokens import (
    SemanticTokensDeltaParams,
    SemanticTokensParams,
    SemanticTokensRangeParams,
)
from .features.signature_help import SignatureHelpParams
from .features.type_definition import TypeDefinitionParams
from .features.type_hierarchy import (
    TypeHierarchyPrepareParams,
    TypeHierarchySubtypesParams,
    TypeHierarchySupertypesParams,
)
from .general import (
    InitializedParams,
    InitializeParams,
    LogTraceParams,
    ProgressParams,
    RegistrationParams,
    SetTraceParams,
    UnregistrationParams,
)
from .lsp_data_model import LspModel
from .protocol_structures import CancelParams
from .window import (
    LogMessageParams,
    ShowDocumentParams,
    ShowMessageParams,
    ShowMessageRequestParams,
    WorkDoneProgressCancelParams,
    WorkDoneProgressCreateParams,
)
from .workspace import (
    ApplyWorkspaceEditParams,
    ConfigurationParams,
    CreateFilesParams,
    DeleteFilesParams,
    DidChangeConfigurationParams,
    DidChangeWatchedFilesParams,
    DidChangeWorkspaceFoldersParams,
    ExecuteCommandParams,
    RenameFilesParams,
    WorkspaceSymbol,
    WorkspaceSymbolParams,
)

logger = get_logger(__name__)


class RequestMethodEnum(str, enum.Enum):
    # General
    INITIALIZE = "initialize"
    INITIALIZED = "initialized"  # Notification
    SHUTDOWN = "shutdown"
    EXIT = "exit"  # Notification

    # Window
    WINDOW_SHOW_MESSAGE = "window/showMessage"  # Notification
    WINDOW_SHOW_MESSAGE_REQUEST = "window/showMessageRequest"
    WINDOW_SHOW_DOCUMENT = "window/showDocument"
    WINDOW_LOG_MESSAGE = "window/logMessage"  # Notification
    WINDOW_WORK_DONE_PROGRESS_CREATE = "window/workDoneProgress/create"
    WINDOW_WORK_DONE_PROGRESS_CANCEL = "window/workDoneProgress/cancel"  # Notification

    # Telemetry
    TELEMETRY_EVENT = "telemetry/event"  # Notification

    # Client
    CLIENT_REGISTER_CAPABILITY = "client/registerCapability"
    CLIENT_UNREGISTER_CAPABILITY = "client/unregisterCapability"

    # Workspace
    WORKSPACE_SYMBOL = "workspace/symbol"
    WORKSPACE_SYMBOL_RESOLVE = "workspaceSymbol/resolve"
    WORKSPACE_CONFIGURATION = "workspace/configuration"
    WORKSPACE_DID_CHANGE_CONFIGURATION = (
        "workspace/didChangeConfiguration"  # Notification
    )
    WORKSPACE_WORKSPACE_FOLDERS = "workspace/workspaceFolders"
    WORKSPACE_DID_CHANGE_WORKSPACE_FOLDERS = (
        "workspace/didChangeWorkspaceFolders"  # Notification
    )
    WORKSPACE_EXECUTE_COMMAND = "workspace/executeCommand"
    WORKSPACE_APPLY_EDIT = "workspace/applyEdit"
    WORKSPACE_CODE_LENS_REFRESH = "workspace/codeLens/refresh"

    # File Operations
    WORKSPACE_WILL_CREATE_FILES = "workspace/willCreateFiles"
    WORKSPACE_DID_CREATE_FILES = "workspace/didCreateFiles"  # Notification
    WORKSPACE_WILL_RENAME_FILES = "workspace/willRenameFiles"
    WORKSPACE_DID_RENAME_FILES = "workspace/didRenameFiles"  # Notification
    WORKSPACE_WILL_DELETE_FILES = "workspace/willDeleteFiles"
    WORKSPACE_DID_DELETE_FILES = "workspace/didDeleteFiles"  # Notification
    WORKSPACE_DID_CHANGE_WATCHED_FILES = (
        "workspace/didChangeWatchedFiles"  # Notification
    )

    # Text Synchronization
    TEXT_DOCUMENT_DID_OPEN = "textDocument/didOpen"  # Notification
    TEXT_DOCUMENT_DID_CHANGE = "textDocument/didChange"  # Notification
    TEXT_DOCUMENT_WILL_SAVE = "textDocument/willSave"  # Notification
    TEXT_DOCUMENT_WILL_SAVE_WAIT_UNTIL = "textDocument/willSaveWaitUntil"
    TEXT_DOCUMENT_DID_SAVE = "textDocument/didSave"  # Notification
    TEXT_DOCUMENT_DID_CLOSE = "textDocument/didClose"  # Notification

    # Language Features
    DECLARATION = "textDocument/declaration"
    DEFINITION = "textDocument/definition"
    TYPE_DEFINITION = "textDocument/typeDefinition"
    IMPLEMENTATION = "textDocument/implementation"
    REFERENCES = "textDocument/references"
    PREPARE_CALL_HIERARCHY = "textDocument/prepareCallHierarchy"
    CALL_HIERARCHY_INCOMING_CALLS = "callHierarchy/incomingCalls"
    CALL_HIERARCHY_OUTGOING_CALLS = "callHierarchy/outgoingCalls"
    PREPARE_TYPE_HIERARCHY = "textDocument/prepareTypeHierarchy"
    TYPE_HIERARCHY_SUPERTYPES = "typeHierarchy/supertypes"
    TYPE_HIERARCHY_SUBTYPES = "typeHierarchy/subtypes"
    DOCUMENT_HIGHLIGHT = "textDocument/documentHighlight"
    DOCUMENT_LINK = "textDocument/documentLink"
    DOCUMENT_LINK_RESOLVE = "documentLink/resolve"
    HOVER = "textDocument/hover"
    CODE_LENS = "textDocument/codeLens"
    CODE_LENS_RESOLVE = "codeLens/resolve"
    FOLDING_RANGE = "textDocument/foldingRange"
    SELECTION_RANGE = "textDocument/selectionRange"
    DOCUMENT_SYMBOL = "textDocument/documentSymbol"
    SEMANTIC_TOKENS_FULL = "textDocument/semanticTokens/full"
    SEMANTIC_TOKENS_FULL_DELTA = "textDocument/semanticTokens/full/delta"
    SEMANTIC_TOKENS_RANGE = "textDocument/semanticTokens/range"
    SEMANTIC_TOKENS_REFRESH = "workspace/semanticTokens/refresh"
    MONIKER = "textDocument/moniker"
    COMPLETION = "textDocument/completion"
    COMPLETION_ITEM_RESOLVE = "completionItem/resolve"
    PUBLISH_DIAGNOSTICS = "textDocument/publishDiagnostics"  # Notification
    SIGNATURE_HELP = "textDocument/signatureHelp"
    CODE_ACTION = "textDocument/codeAction"
    CODE_ACTION_RESOLVE = "codeAction/resolve"
    DOCUMENT_COLOR = "textDocument/documentColor"
    COLOR_PRESENTATION = "textDocument/colorPresentation"
    FORMATTING = "textDocument/formatting"
    RANGE_FORMATTING = "textDocument/rangeFormatting"
    ON_TYPE_FORMATTING = "textDocument/onTypeFormatting"
    RENAME = "textDocument/rename"
    PREPARE_RENAME = "textDocument/prepareRename"
    LINKED_EDITING_RANGE = "textDocument/linkedEditingRange"

    # Other
    CANCEL_REQUEST = "$/cancelRequest"
    PROGRESS = "$/progress"
    LOG_TRACE = "$/logTrace"  # Notification
    SET_TRACE = "$/setTrace"  # Notification

    def __str__(self) -> str:
        return self.value


PARAMS_TYPES: Mapping[RequestMethodEnum, Type[LspModel]] = MappingProxyType(
    {
        RequestMethodEnum.INITIALIZE: InitializeParams,
        RequestMethodEnum.INITIALIZED: InitializedParams,
        RequestMethodEnum.WINDOW_SHOW_MESSAGE: ShowMessageParams,
        RequestMethodEnum.WINDOW_SHOW_MESSAGE_REQUEST: ShowMessageRequestParams,
        RequestMethodEnum.WINDOW_SHOW_DOCUMENT: ShowDocumentParams,
        RequestMethodEnum.WINDOW_LOG_MESSAGE: LogMessageParams,
        RequestMethodEnum.WINDOW_WORK_DONE_PROGRESS_CREATE: WorkDoneProgressCreateParams,
        RequestMethodEnum.WINDOW_WORK_DONE_PROGRESS_CANCEL: WorkDoneProgressCancelParams,
        RequestMethodEnum.CLIENT_REGISTER_CAPABILITY: RegistrationParams,
        RequestMethodEnum.CLIENT_UNREGISTER_CAPABILITY: UnregistrationParams,
        RequestMethodEnum.WORKSPACE_SYMBOL: WorkspaceSymbolParams,
        RequestMethodEnum.WORKSPACE_SYMBOL_RESOLVE: WorkspaceSymbol,
        RequestMethodEnum.WORKSPACE_CONFIGURATION: ConfigurationParams,
        RequestMethodEnum.WORKSPACE_DID_CHANGE_CONFIGURATION: DidChangeConfigurationParams,
        RequestMethodEnum.WORKSPACE_DID_CHANGE_WORKSPACE_FOLDERS: DidChangeWorkspaceFoldersParams,
        RequestMethodEnum.WORKSPACE_EXECUTE_COMMAND: ExecuteCommandParams,
        RequestMethodEnum.WORKSPACE_APPLY_EDIT: ApplyWorkspaceEditParams,
        RequestMethodEnum.WORKSPACE_WILL_CREATE_FILES: CreateFilesParams,
        RequestMethodEnum.WORKSPACE_DID_CREATE_FILES: CreateFilesParams,
        RequestMethodEnum.WORKSPACE_WILL_RENAME_FILES: RenameFilesParams,
        RequestMethodEnum.WORKSPACE_DID_RENAME_FILES: RenameFilesParams,
        RequestMethodEnum.WORKSPACE_WILL_DELETE_FILES: DeleteFilesParams,
        RequestMethodEnum.WORKSPACE_DID_DELETE_FILES: DeleteFilesParams,
        RequestMethodEnum.WORKSPACE_DID_CHANGE_WATCHED_FILES: DidChangeWatchedFilesParams,
        RequestMethodEnum.TEXT_DOCUMENT_DID_OPEN: DidOpenTextDocumentParams,
        RequestMethodEnum.TEXT_DOCUMENT_DID_CHANGE: DidChangeTextDocumentParams,
        RequestMethodEnum.TEXT_DOCUMENT_WILL_SAVE: WillSaveTextDocumentParams,
        RequestMethodEnum.TEXT_DOCUMENT_WILL_SAVE_WAIT_UNTIL: WillSaveTextDocumentParams,
        RequestMethodEnum.TEXT_DOCUMENT_DID_SAVE: DidSaveTextDocumentParams,
        RequestMethodEnum.TEXT_DOCUMENT_DID_CLOSE: DidCloseTextDocumentParams,
        RequestMethodEnum.DECLARATION: DeclarationParams,
        RequestMethodEnum.DEFINITION: DefinitionParams,
        RequestMethodEnum.TYPE_DEFINITION: TypeDefinitionParams,
        RequestMethodEnum.IMPLEMENTATION: ImplementationParams,
        RequestMethodEnum.REFERENCES: ReferenceParams,
        RequestMethodEnum.PREPARE_CALL_HIERARCHY: CallHierarchyPrepareParams,
        RequestMethodEnum.CALL_HIERARCHY_INCOMING_CALLS: CallHierarchyIncomingCallsParams,
        RequestMethodEnum.CALL_HIERARCHY_OUTGOING_CALLS: CallHierarchyOutgoingCallsParams,
        RequestMethodEnum.PREPARE_TYPE_HIERARCHY: TypeHierarchyPrepareParams,
        RequestMethodEnum.TYPE_HIERARCHY_SUPERTYPES: TypeHierarchySupertypesParams,
        RequestMethodEnum.TYPE_HIERARCHY_SUBTYPES: TypeHierarchySubtypesParams,
        RequestMethodEnum.DOCUMENT_HIGHLIGHT: DocumentHighlightParams,
        RequestMethodEnum.DOCUMENT_LINK: DocumentLinkParams,
        RequestMethodEnum.DOCUMENT_LINK_RESOLVE: DocumentLink,
        RequestMethodEnum.HOVER: HoverParams,
        RequestMethodEnum.CODE_LENS: CodeLensParams,
        RequestMethodEnum.CODE_LENS_RESOLVE: CodeLens,
        RequestMethodEnum.FOLDING_RANGE: FoldingRangeParams,
        RequestMethodEnum.SELECTION_RANGE: SelectionRangeParams,
        RequestMethodEnum.DOCUMENT_SYMBOL: DocumentSymbolParams,
        RequestMethodEnum.SEMANTIC_TOKENS_FULL: SemanticTokensParams,
        RequestMethodEnum.SEMANTIC_TOKENS_FULL_DELTA: SemanticTokensDeltaParams,
        RequestMethodEnum.SEMANTIC_TOKENS_RANGE: SemanticTokensRangeParams,
        RequestMethodEnum.MONIKER: MonikerParams,
        RequestMethodEnum.COMPLETION: CompletionParams,
        RequestMethodEnum.COMPLETION_ITEM_RESOLVE: CompletionItem,
        RequestMethodEnum.PUBLISH_DIAGNOSTICS: PublishDiagnosticsParams,
        RequestMethodEnum.SIGNATURE_HELP: SignatureHelpParams,
        RequestMethodEnum.CODE_ACTION: CodeActionParams,
        RequestMethodEnum.CODE_ACTION_RESOLVE: CodeAction,
        RequestMethodEnum.DOCUMENT_COLOR: DocumentColorParams,
        RequestMethodEnum.COLOR_PRESENTATION: ColorPresentationParams,
        RequestMethodEnum.FORMATTING: DocumentFormattingParams,
        RequestMethodEnum.RANGE_FORMATTING: DocumentRangeFormattingParams,
        RequestMethodEnum.ON_TYPE_FORMATTING: DocumentOnTypeFormattingParams,
        RequestMethodEnum.RENAME: RenameParams,
        RequestMethodEnum.PREPARE_RENAME: PrepareRenameParams,
        RequestMethodEnum.LINKED_EDITING_RANGE: LinkedEditingRangeParams,
        RequestMethodEnum.CANCEL_REQUEST: CancelParams,
        RequestMethodEnum.PROGRESS: ProgressParams,
        RequestMethodEnum.LOG_TRACE: LogTraceParams,
        RequestMethodEnum.SET_TRACE: SetTraceParams,
    }
)
"""
Params type of every method that carries params. Methods without params
(`shutdown`, `exit`, refresh requests) have no entry.
"""


def params_type(method: Union[RequestMethodEnum, str]) -> Type[LspModel]:
    try:
        return PARAMS_TYPES[RequestMethodEnum(method)]
    except (ValueError, KeyError):
        raise UnknownMethodError(
            f"No params type registered for method {method}"
        ) from None


def decode_params(method: Union[RequestMethodEnum, str], params: Optional[Any]) -> Any:
    """
    Decode the `params` member of a request or notification for `method`.

    Raises:
        UnknownMethodError: `method` is not a known method carrying params.
        DecodeError: `params` does not match the method's params type.
    """
    target = params_type(method)
    logger.debug(f"Decoding params of {method} as {target.__name__}")
    return decode_object({} if params is None else params, target)
