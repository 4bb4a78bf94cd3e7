from typing import Optional

from pydantic import StrictBool

from ..common_structures import (
    PartialResultParams,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class ReferenceClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether references supports dynamic registration.
    """


class ReferenceOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class ReferenceRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    reference_options: Embedded[ReferenceOptions]


class ReferenceContext(LspModel):
    include_declaration: StrictBool = False
    """
    Include the declaration of the current symbol.
    """


class ReferenceParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    context: ReferenceContext = ReferenceContext()
