from typing import Optional

from pydantic import StrictBool, StrictStr

from lsproto.utils import OpenIntEnum

from ..common_structures import (
    Range,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel, variant


class PrepareSupportDefaultBehavior(OpenIntEnum):
    IDENTIFIER = 1
    """
    The client's default behavior is to select the identifier
    according to the language's syntax rule.
    """


class RenameClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether rename supports dynamic registration.
    """
    prepare_support: Optional[StrictBool] = None
    """
    Client supports testing for validity of rename operations
    before execution.
    """
    prepare_support_default_behavior: Optional[PrepareSupportDefaultBehavior] = None
    """
    Client supports the default behavior result
    (`{ defaultBehavior: boolean }`).

    The value indicates the default behavior used by the
    client.
    """
    honors_change_annotations: Optional[StrictBool] = None
    """
    Whether the client honors the change annotations in
    text edits and resource operations returned via the
    rename request's workspace edit by for example presenting
    the workspace edit in the user interface and asking
    for confirmation.
    """


class RenameOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    prepare_provider: Optional[StrictBool] = None
    """
    Renames should be checked and tested before being executed.
    """


class RenameRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    rename_options: Embedded[RenameOptions]


class RenameParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    new_name: StrictStr = ""
    """
    The new name of the symbol. If the given name is not valid the
    request must return a [ResponseError](#ResponseError) with an
    appropriate message set.
    """


class PrepareRenameParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]


class PrepareRenamePlaceholder(LspModel):
    range: Range = Range()
    placeholder: StrictStr = ""


class PrepareRenameDefaultBehavior(LspModel):
    default_behavior: StrictBool = False


PrepareRenameResult = variant(
    PrepareRenamePlaceholder, PrepareRenameDefaultBehavior, Range
)
