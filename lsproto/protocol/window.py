from typing import List, Optional

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum

from .common_structures import URI, ProgressToken, Range
from .lsp_data_model import LspModel


class MessageType(OpenIntEnum):
    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4

    def __str__(self) -> str:
        if self._name_ is None:
            return str(self._value_)
        return self._name_.lower()

    def enabled(self, level: "MessageType") -> bool:
        """
        Whether a message of type `level` passes a filter set to `self`.
        """
        return level > 0 and self >= level

    @classmethod
    def from_level(cls, level: str) -> "MessageType":
        """
        Map a level name (`error`, `warning`, `info`, `log`) to its message type.
        Unknown names map to the unknown type `0`.
        """
        for member in cls:
            if str(member) == level:
                return member
        return cls(0)


class ShowMessageParams(LspModel):
    type: MessageType = MessageType(0)
    """
    The message type.
    """
    message: StrictStr = ""
    """
    The actual message.
    """


class MessageActionItem(LspModel):
    title: StrictStr = ""
    """
    A short title like 'Retry', 'Open Log' etc.
    """


class ShowMessageRequestParams(LspModel):
    type: MessageType = MessageType(0)
    message: StrictStr = ""
    actions: Optional[List[MessageActionItem]] = None
    """
    The message action items to present.
    """


class LogMessageParams(LspModel):
    type: MessageType = MessageType(0)
    message: StrictStr = ""


class ShowDocumentParams(LspModel):
    """
    Params to show a resource.

    @since 3.16.0
    """

    uri: URI = ""
    """
    The uri to show.
    """
    external: Optional[StrictBool] = None
    """
    Indicates to show the resource in an external program.
    To show, for example, `https://code.visualstudio.com/`
    in the default WEB browser set `external` to `true`.
    """
    take_focus: Optional[StrictBool] = None
    """
    An optional property to indicate whether the editor
    showing the document should take focus or not.
    Clients might ignore this property if an external
    program is started.
    """
    selection: Optional[Range] = None
    """
    An optional selection range if the document is a text
    document. Clients might ignore the property if an
    external program is started or the file is not a text
    file.
    """


class ShowDocumentResult(LspModel):
    success: StrictBool = False
    """
    A boolean indicating if the show was successful.
    """


class WorkDoneProgressCreateParams(LspModel):
    token: ProgressToken = Field(default_factory=lambda: ProgressToken(""))
    """
    The token to be used to report progress.
    """


class WorkDoneProgressCancelParams(LspModel):
    token: ProgressToken = Field(default_factory=lambda: ProgressToken(""))
    """
    The token to be used to report progress.
    """


class ShowMessageRequestClientCapabilitiesMessageActionItem(LspModel):
    additional_properties_support: Optional[StrictBool] = None


class ShowMessageRequestClientCapabilities(LspModel):
    message_action_item: Optional[
        ShowMessageRequestClientCapabilitiesMessageActionItem
    ] = None


class ShowDocumentClientCapabilities(LspModel):
    support: StrictBool = False
