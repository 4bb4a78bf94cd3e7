from typing import Optional

from pydantic import StrictBool

from ..common_structures import (
    PartialResultParams,
    StaticRegistrationOptions,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class DeclarationClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether declaration supports dynamic registration. If this is set to
    `true` the client supports the new `DeclarationRegistrationOptions`
    return value for the corresponding server capability as well.
    """
    link_support: Optional[StrictBool] = None
    """
    The client supports additional metadata in the form of declaration links.
    """


class DeclarationOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DeclarationRegistrationOptions(LspModel):
    declaration_options: Embedded[DeclarationOptions]
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class DeclarationParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
