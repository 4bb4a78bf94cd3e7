from typing import List, Optional

from pydantic import Field, StrictBool

from ..common_structures import (
    PartialResultParams,
    Position,
    Range,
    StaticRegistrationOptions,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class SelectionRangeClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class SelectionRangeOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class SelectionRangeRegistrationOptions(LspModel):
    selection_range_options: Embedded[SelectionRangeOptions]
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class SelectionRangeParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    positions: List[Position] = Field(default_factory=list)
    """
    The positions inside the text document.
    """


class SelectionRange(LspModel):
    range: Range = Range()
    parent: Optional["SelectionRange"] = None
    """
    The parent selection range containing this range. Therefore
    `parent.range` must contain `this.range`.
    """
