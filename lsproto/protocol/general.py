from typing import Any, List, Literal, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from lsproto.utils import OpenIntEnum, StrEnum

from .client_capabilities import ClientCapabilities
from .common_structures import (
    DocumentUri,
    ProgressToken,
    UInteger,
    WorkDoneProgressParams,
)
from .lsp_data_model import Embedded, LspModel, Nullable
from .server_capabilities import ServerCapabilities
from .workspace import WorkspaceFolder


class TraceValue(StrEnum):
    OFF = "off"
    MESSAGES = "messages"
    VERBOSE = "verbose"


class ClientInfo(LspModel):
    """
    Information about the client.

    @since 3.15.0
    """

    name: StrictStr = ""
    """
    The name of the client as defined by the client.
    """
    version: Optional[StrictStr] = None
    """
    The client's version as defined by the client.
    """


class ServerInfo(LspModel):
    name: StrictStr = ""
    """
    The name of the server as defined by the server.
    """
    version: Optional[StrictStr] = None
    """
    The server's version as defined by the server.
    """


class InitializeParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    process_id: Nullable[StrictInt] = None
    """
    The process Id of the parent process that started the server. Is null if
    the process has not been started by another process. If the parent
    process is not alive then the server should exit (see exit notification)
    its process.
    """
    client_info: Optional[ClientInfo] = None
    locale: Optional[StrictStr] = None
    """
    The locale the client is currently showing the user interface
    in. This must not necessarily be the locale of the operating
    system.

    Uses IETF language tags as the value's syntax.
    """
    root_path: Optional[StrictStr] = None
    """
    The rootPath of the workspace. Is null
    if no folder is open.

    @deprecated in favour of `rootUri`.
    """
    root_uri: Nullable[DocumentUri] = None
    """
    The rootUri of the workspace. Is null if no
    folder is open. If both `rootPath` and `rootUri` are set
    `rootUri` wins.

    @deprecated in favour of `workspaceFolders`
    """
    initialization_options: Optional[Any] = None
    """
    User provided initialization options.
    """
    capabilities: ClientCapabilities = ClientCapabilities()
    """
    The capabilities provided by the client (editor or tool)
    """
    trace: Optional[TraceValue] = None
    """
    The initial trace setting. If omitted trace is disabled ('off').
    """
    workspace_folders: Optional[List[WorkspaceFolder]] = None
    """
    The workspace folders configured in the client when the server starts.
    This property is only available if the client supports workspace folders.
    It can be `null` if the client supports workspace folders but none are
    configured.
    """


class InitializeResult(LspModel):
    capabilities: ServerCapabilities = ServerCapabilities()
    """
    The capabilities the language server provides.
    """
    server_info: Optional[ServerInfo] = None
    """
    Information about the server.

    @since 3.15.0
    """


class InitializeErrorCodes(OpenIntEnum):
    UNKNOWN_PROTOCOL_VERSION = 1
    """
    If the protocol version provided by the client can't be handled by
    the server.

    @deprecated This initialize error got replaced by client capabilities.
    There is no version handshake in version 3.0x
    """


class InitializeError(LspModel):
    retry: StrictBool = False
    """
    Indicates whether the client execute the following retry logic:
    (1) show the message provided by the ResponseError to the user
    (2) user selects retry or cancel
    (3) if user selected retry the initialize method is sent again.
    """


class InitializedParams(LspModel):
    pass


class SetTraceParams(LspModel):
    value: TraceValue = TraceValue.OFF
    """
    The new value that should be assigned to the trace setting.
    """


class LogTraceParams(LspModel):
    message: StrictStr = ""
    """
    The message to be logged.
    """
    verbose: Optional[StrictStr] = None
    """
    Additional information that can be computed if the `trace` configuration
    is set to `'verbose'`
    """


class Registration(LspModel):
    id: StrictStr = ""
    """
    The id used to register the request. The id can be used to deregister
    the request again.
    """
    method: StrictStr = ""
    """
    The method / capability to register for.
    """
    register_options: Optional[Any] = None
    """
    Options necessary for the registration.
    """


class RegistrationParams(LspModel):
    registrations: List[Registration] = Field(default_factory=list)


class Unregistration(LspModel):
    id: StrictStr = ""
    """
    The id used to unregister the request or notification. Usually an id
    provided during the register request.
    """
    method: StrictStr = ""
    """
    The method / capability to unregister for.
    """


class UnregistrationParams(LspModel):
    # the protocol spells the key this way
    unregistrations: List[Unregistration] = Field(
        default_factory=list, alias="unregisterations"
    )


class ProgressParams(LspModel):
    token: ProgressToken = Field(default_factory=lambda: ProgressToken(""))
    """
    The progress token provided by the client or server.
    """
    value: Any = None
    """
    The progress data.
    """


class WorkDoneProgressBegin(LspModel):
    kind: Literal["begin"] = "begin"
    title: StrictStr = ""
    """
    Mandatory title of the progress operation. Used to briefly inform about
    the kind of operation being performed.

    Examples: "Indexing" or "Linking dependencies".
    """
    cancellable: Optional[StrictBool] = None
    """
    Controls if a cancel button should show to allow the user to cancel the
    long running operation. Clients that don't support cancellation are
    allowed to ignore the setting.
    """
    message: Optional[StrictStr] = None
    """
    Optional, more detailed associated progress message. Contains
    complementary information to the `title`.

    Examples: "3/25 files", "project/src/module2", "node_modules/some_dep".
    If unset, the previous progress message (if any) is still valid.
    """
    percentage: Optional[UInteger] = None
    """
    Optional progress percentage to display (value 100 is considered 100%).
    If not provided infinite progress is assumed and clients are allowed
    to ignore the `percentage` value in subsequent in report notifications.
    """


class WorkDoneProgressReport(LspModel):
    kind: Literal["report"] = "report"
    cancellable: Optional[StrictBool] = None
    message: Optional[StrictStr] = None
    percentage: Optional[UInteger] = None


class WorkDoneProgressEnd(LspModel):
    kind: Literal["end"] = "end"
    message: Optional[StrictStr] = None
    """
    Optional, a final message indicating to for example indicate the outcome
    of the operation.
    """
