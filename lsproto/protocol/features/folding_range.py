from typing import Optional

from pydantic import StrictBool, StrictStr

from lsproto.utils import StrEnum

from ..common_structures import (
    PartialResultParams,
    StaticRegistrationOptions,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    UInteger,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class FoldingRangeKind(StrEnum):
    COMMENT = "comment"
    """
    Folding range for a comment
    """
    IMPORTS = "imports"
    """
    Folding range for an import or include
    """
    REGION = "region"
    """
    Folding range for a region (e.g. `#region`)
    """


class FoldingRangeClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    range_limit: Optional[UInteger] = None
    """
    The maximum number of folding ranges that the client prefers to receive
    per document. The value serves as a hint, servers are free to follow the
    limit.
    """
    line_folding_only: Optional[StrictBool] = None
    """
    If set, the client signals that it only supports folding complete lines.
    If set, client will ignore specified `startCharacter` and `endCharacter`
    properties in a FoldingRange.
    """


class FoldingRangeOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class FoldingRangeRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    folding_range_options: Embedded[FoldingRangeOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class FoldingRangeParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()


class FoldingRange(LspModel):
    start_line: UInteger = 0
    """
    The zero-based start line of the range to fold. The folded area starts
    after the line's last character. To be valid, the end must be zero or
    larger and smaller than the number of lines in the document.
    """
    start_character: Optional[UInteger] = None
    end_line: UInteger = 0
    end_character: Optional[UInteger] = None
    kind: Optional[FoldingRangeKind] = None
    collapsed_text: Optional[StrictStr] = None
