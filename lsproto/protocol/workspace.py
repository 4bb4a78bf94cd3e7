from typing import Any, List, Optional, Union

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum, StrEnum

from .common_structures import (
    DocumentUri,
    Location,
    PartialResultParams,
    SymbolKind,
    SymbolKindClientCapabilities,
    SymbolTag,
    SymbolTagSupportClientCapabilities,
    UInteger,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
    WorkspaceEdit,
)
from .lsp_data_model import Embedded, LspModel, variant


class WorkspaceFolder(LspModel):
    uri: DocumentUri = ""
    """
    The associated URI for this workspace folder.
    """
    name: StrictStr = ""
    """
    The name of the workspace folder. Used to refer to this
    workspace folder in the user interface.
    """


WorkspaceFolders = List[WorkspaceFolder]


class WorkspaceFoldersChangeEvent(LspModel):
    added: List[WorkspaceFolder] = Field(default_factory=list)
    """
    The array of added workspace folders
    """
    removed: List[WorkspaceFolder] = Field(default_factory=list)
    """
    The array of the removed workspace folders
    """


class DidChangeWorkspaceFoldersParams(LspModel):
    event: WorkspaceFoldersChangeEvent = WorkspaceFoldersChangeEvent()


class WorkspaceFoldersServerCapabilities(LspModel):
    supported: Optional[StrictBool] = None
    """
    The server has support for workspace folders
    """
    change_notifications: Optional[Union[StrictStr, StrictBool]] = None
    """
    Whether the server wants to receive workspace folder
    change notifications.

    If a string is provided, the string is treated as an ID
    under which the notification is registered on the client
    side. The ID can be used to unregister for these events
    using the `client/unregisterCapability` request.
    """


class ConfigurationItem(LspModel):
    scope_uri: Optional[DocumentUri] = None
    """
    The scope to get the configuration section for.
    """
    section: Optional[StrictStr] = None
    """
    The configuration section asked for.
    """


class ConfigurationParams(LspModel):
    items: List[ConfigurationItem] = Field(default_factory=list)


class DidChangeConfigurationClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DidChangeConfigurationParams(LspModel):
    settings: Any = None
    """
    The actual changed settings
    """


class WatchKind(OpenIntEnum):
    CREATE = 1
    CHANGE = 2
    DELETE = 4


class FileSystemWatcher(LspModel):
    glob_pattern: StrictStr = ""
    kind: Optional[WatchKind] = None
    """
    The kind of events of interest. If omitted it defaults
    to WatchKind.Create | WatchKind.Change | WatchKind.Delete
    which is 7.
    """


class DidChangeWatchedFilesClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    relative_pattern_support: Optional[StrictBool] = None


class DidChangeWatchedFilesRegistrationOptions(LspModel):
    watchers: List[FileSystemWatcher] = Field(default_factory=list)
    """
    The watchers to register.
    """


class FileChangeType(OpenIntEnum):
    CREATED = 1
    CHANGED = 2
    DELETED = 3


class FileEvent(LspModel):
    uri: DocumentUri = ""
    """
    The file's URI.
    """
    type: FileChangeType = FileChangeType(0)
    """
    The change type.
    """


class DidChangeWatchedFilesParams(LspModel):
    changes: List[FileEvent] = Field(default_factory=list)
    """
    The actual file events.
    """


class FileOperationPatternKind(StrEnum):
    FILE = "file"
    FOLDER = "folder"


class FileOperationPatternOptions(LspModel):
    ignore_case: Optional[StrictBool] = None
    """
    The pattern should be matched ignoring casing.
    """


class FileOperationPattern(LspModel):
    glob: StrictStr = ""
    """
    The glob pattern to match. Glob patterns can have the following syntax:
    - `*` to match one or more characters in a path segment
    - `?` to match one character in a path segment
    - `**` to match one or more characters in a path segment, including none
    - `{}` to group sub patterns into an OR expression. (e.g. `**/*.{ts,js}`
        matches all TypeScript and JavaScript files)
    - `[]` to declare a range of characters to match in a path segment
        (e.g., `example.[0-9]` to match `example.0`, `example.1`, …)
    - `[!...]` to negate a range of characters to match in a path segment
        (e.g., `example.[!0-9]` to match `example.a`, `example.b`, but
        not `example.0`)
    """
    matches: Optional[FileOperationPatternKind] = None
    """
    Whether to match files or folders with this pattern.

    Matches both if undefined.
    """
    options: Optional[FileOperationPatternOptions] = None
    """
    Additional options used during matching.
    """


class FileOperationFilter(LspModel):
    scheme: Optional[StrictStr] = None
    """
    A Uri like `file` or `untitled`.
    """
    pattern: FileOperationPattern = FileOperationPattern()
    """
    The actual file operation pattern.
    """


class FileOperationRegistrationOptions(LspModel):
    filters: List[FileOperationFilter] = Field(default_factory=list)
    """
    The actual filters.
    """


class FileOperationClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    did_create: Optional[StrictBool] = None
    will_create: Optional[StrictBool] = None
    did_rename: Optional[StrictBool] = None
    will_rename: Optional[StrictBool] = None
    did_delete: Optional[StrictBool] = None
    will_delete: Optional[StrictBool] = None


class FileCreate(LspModel):
    uri: StrictStr = ""
    """
    A file:// URI for the location of the file/folder being created.
    """


class CreateFilesParams(LspModel):
    files: List[FileCreate] = Field(default_factory=list)
    """
    An array of all files/folders created in this operation.
    """


class FileRename(LspModel):
    old_uri: StrictStr = ""
    """
    A file:// URI for the original location of the file/folder being renamed.
    """
    new_uri: StrictStr = ""
    """
    A file:// URI for the new location of the file/folder being renamed.
    """


class RenameFilesParams(LspModel):
    files: List[FileRename] = Field(default_factory=list)
    """
    An array of all files/folders renamed in this operation. When a folder
    is renamed, only the folder will be included, and not its children.
    """


class FileDelete(LspModel):
    uri: StrictStr = ""
    """
    A file:// URI for the location of the file/folder being deleted.
    """


class DeleteFilesParams(LspModel):
    files: List[FileDelete] = Field(default_factory=list)
    """
    An array of all files/folders deleted in this operation.
    """


class ExecuteCommandClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class ExecuteCommandOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    commands: List[StrictStr] = Field(default_factory=list)
    """
    The commands to be executed on the server
    """


class ExecuteCommandRegistrationOptions(LspModel):
    execute_command_options: Embedded[ExecuteCommandOptions]


class ExecuteCommandParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    command: StrictStr = ""
    """
    The identifier of the actual command handler.
    """
    arguments: Optional[List[Any]] = None
    """
    Arguments that the command should be invoked with.
    """


class ApplyWorkspaceEditParams(LspModel):
    label: Optional[StrictStr] = None
    """
    An optional label of the workspace edit. This label is
    presented in the user interface for example on an undo
    stack to undo the workspace edit.
    """
    edit: WorkspaceEdit = WorkspaceEdit()
    """
    The edits to apply.
    """


class ApplyWorkspaceEditResult(LspModel):
    applied: StrictBool = False
    """
    Indicates whether the edit was applied or not.
    """
    failure_reason: Optional[StrictStr] = None
    failed_change: Optional[UInteger] = None
    """
    Depending on the client's failure handling strategy `failedChange`
    might contain the index of the change that failed.
    """


class ResourceOperationKind(StrEnum):
    CREATE = "create"
    RENAME = "rename"
    DELETE = "delete"


class FailureHandlingKind(StrEnum):
    ABORT = "abort"
    TRANSACTIONAL = "transactional"
    TEXT_ONLY_TRANSACTIONAL = "textOnlyTransactional"
    UNDO = "undo"


class ChangeAnnotationsSupport(LspModel):
    groups_on_label: Optional[StrictBool] = None


class WorkspaceEditClientCapabilities(LspModel):
    document_changes: Optional[StrictBool] = None
    """
    The client supports versioned document changes in `WorkspaceEdit`s
    """
    resource_operations: Optional[List[ResourceOperationKind]] = None
    failure_handling: Optional[FailureHandlingKind] = None
    normalizes_line_endings: Optional[StrictBool] = None
    change_annotation_support: Optional[ChangeAnnotationsSupport] = None


class WorkspaceSymbolResolveSupport(LspModel):
    properties: List[StrictStr] = Field(default_factory=list)
    """
    The properties that a client can resolve lazily. Usually
    `location.range`
    """


class WorkspaceSymbolClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    symbol_kind: Optional[SymbolKindClientCapabilities] = None
    tag_support: Optional[SymbolTagSupportClientCapabilities] = None
    resolve_support: Optional[WorkspaceSymbolResolveSupport] = None


class WorkspaceSymbolOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    resolve_provider: Optional[StrictBool] = None
    """
    The server provides support to resolve additional
    information for a workspace symbol.
    """


class WorkspaceSymbolRegistrationOptions(LspModel):
    workspace_symbol_options: Embedded[WorkspaceSymbolOptions]


class WorkspaceSymbolParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    query: StrictStr = ""
    """
    A query string to filter symbols by. Clients may send an empty
    string here to request all symbols.
    """


class WorkspaceSymbolLocation(LspModel):
    uri: DocumentUri = ""


SymbolLocation = variant(Location, WorkspaceSymbolLocation)


class WorkspaceSymbol(LspModel):
    name: StrictStr = ""
    kind: SymbolKind = SymbolKind(0)
    tags: Optional[List[SymbolTag]] = None
    container_name: Optional[StrictStr] = None
    location: SymbolLocation = WorkspaceSymbolLocation()
    """
    The location of this symbol. Whether a server is allowed to
    return a location without a range depends on the client
    capability `workspace.symbol.resolveSupport`.
    """
    data: Optional[Any] = None
