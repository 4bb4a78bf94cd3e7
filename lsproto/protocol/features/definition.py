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


class DefinitionClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    link_support: Optional[StrictBool] = None
    """
    The client supports additional metadata in the form of definition links.
    """


class DefinitionOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DefinitionRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    definition_options: Embedded[DefinitionOptions]


class DefinitionParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
