from typing import Optional

from pydantic import StrictBool

from lsproto.utils import OpenIntEnum

from ..common_structures import (
    PartialResultParams,
    Range,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class DocumentHighlightKind(OpenIntEnum):
    TEXT = 1
    """
    A textual occurrence.
    """
    READ = 2
    """
    Read-access of a symbol, like reading a variable.
    """
    WRITE = 3
    """
    Write-access of a symbol, like writing to a variable.
    """


class DocumentHighlightClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DocumentHighlightOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DocumentHighlightRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_highlight_options: Embedded[DocumentHighlightOptions]


class DocumentHighlightParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]


class DocumentHighlight(LspModel):
    """
    A document highlight is a range inside a text document which deserves
    special attention. Usually a document highlight is visualized by changing
    the background color of its range.
    """

    range: Range = Range()
    kind: Optional[DocumentHighlightKind] = None
    """
    The highlight kind, default is DocumentHighlightKind.Text.
    """
