from typing import List, Optional

from pydantic import Field, StrictBool, StrictStr

from ..common_structures import (
    Range,
    StaticRegistrationOptions,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class LinkedEditingRangeClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class LinkedEditingRangeOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class LinkedEditingRangeRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    linked_editing_range_options: Embedded[LinkedEditingRangeOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class LinkedEditingRangeParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]


class LinkedEditingRanges(LspModel):
    ranges: List[Range] = Field(default_factory=list)
    """
    A list of ranges that can be renamed together. The ranges must have
    identical length and contain identical text content. The ranges cannot
    overlap.
    """
    word_pattern: Optional[StrictStr] = None
