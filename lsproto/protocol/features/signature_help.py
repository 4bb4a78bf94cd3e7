from typing import List, Optional, Tuple, Union

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum

from ..common_structures import (
    MarkupContent,
    MarkupKind,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    UInteger,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class SignatureHelpTriggerKind(OpenIntEnum):
    INVOKED = 1
    """
    Signature help was invoked manually by the user or by a command.
    """
    TRIGGER_CHARACTER = 2
    """
    Signature help was triggered by a trigger character.
    """
    CONTENT_CHANGE = 3
    """
    Signature help was triggered by the cursor moving or by the document
    content changing.
    """


class ParameterInformationClientCapabilities(LspModel):
    label_offset_support: Optional[StrictBool] = None


class SignatureInformationClientCapabilities(LspModel):
    documentation_format: Optional[List[MarkupKind]] = None
    parameter_information: Optional[ParameterInformationClientCapabilities] = None
    active_parameter_support: Optional[StrictBool] = None


class SignatureHelpClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    signature_information: Optional[SignatureInformationClientCapabilities] = None
    context_support: Optional[StrictBool] = None


class SignatureHelpOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    trigger_characters: Optional[List[StrictStr]] = None
    """
    The characters that trigger signature help
    automatically.
    """
    retrigger_characters: Optional[List[StrictStr]] = None
    """
    List of characters that re-trigger signature help.

    These trigger characters are only active when signature help is already
    showing. All trigger characters are also counted as re-trigger
    characters.
    """


class SignatureHelpRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    signature_help_options: Embedded[SignatureHelpOptions]


class ParameterInformation(LspModel):
    label: Union[StrictStr, Tuple[UInteger, UInteger]] = ""
    """
    The label of this parameter information.

    Either a string or an inclusive start and exclusive end offsets within
    its containing signature label.
    """
    documentation: Optional[Union[StrictStr, MarkupContent]] = None


class SignatureInformation(LspModel):
    label: StrictStr = ""
    documentation: Optional[Union[StrictStr, MarkupContent]] = None
    parameters: Optional[List[ParameterInformation]] = None
    active_parameter: Optional[UInteger] = None


class SignatureHelp(LspModel):
    signatures: List[SignatureInformation] = Field(default_factory=list)
    """
    One or more signatures. If no signatures are available the signature help
    request should return `null`.
    """
    active_signature: Optional[UInteger] = None
    active_parameter: Optional[UInteger] = None


class SignatureHelpContext(LspModel):
    trigger_kind: SignatureHelpTriggerKind = SignatureHelpTriggerKind(0)
    trigger_character: Optional[StrictStr] = None
    is_retrigger: StrictBool = False
    """
    `true` if signature help was already showing when it was triggered.
    """
    active_signature_help: Optional[SignatureHelp] = None


class SignatureHelpParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    context: Optional[SignatureHelpContext] = None
