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


class TypeDefinitionClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    link_support: Optional[StrictBool] = None


class TypeDefinitionOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class TypeDefinitionRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    type_definition_options: Embedded[TypeDefinitionOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class TypeDefinitionParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
