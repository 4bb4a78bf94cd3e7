from typing import List, Optional

from pydantic import StrictBool, StrictFloat, StrictStr

from ..common_structures import (
    PartialResultParams,
    Range,
    StaticRegistrationOptions,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    TextEdit,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class DocumentColorClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DocumentColorOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DocumentColorRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]
    document_color_options: Embedded[DocumentColorOptions]


class DocumentColorParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()


class Color(LspModel):
    """
    Represents a color in RGBA space. Every component is in the range [0-1].
    """

    red: StrictFloat = 0.0
    green: StrictFloat = 0.0
    blue: StrictFloat = 0.0
    alpha: StrictFloat = 0.0


class ColorInformation(LspModel):
    range: Range = Range()
    """
    The range in the document where this color appears.
    """
    color: Color = Color()
    """
    The actual color value for this color range.
    """


class ColorPresentationParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    color: Color = Color()
    range: Range = Range()


class ColorPresentation(LspModel):
    label: StrictStr = ""
    """
    The label of this color presentation. It will be shown on the color
    picker header. By default this is also the text that is inserted when
    selecting this color presentation.
    """
    text_edit: Optional[TextEdit] = None
    additional_text_edits: Optional[List[TextEdit]] = None
