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


class ImplementationClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether implementation supports dynamic registration. If this is set to
    `true` the client supports the new `ImplementationRegistrationOptions`
    return value for the corresponding server capability as well.
    """
    link_support: Optional[StrictBool] = None
    """
    The client supports additional metadata in the form of definition links.

    @since 3.14.0
    """


class ImplementationOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class ImplementationRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    implementation_options: Embedded[ImplementationOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class ImplementationParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
