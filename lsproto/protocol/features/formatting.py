from typing import List, Optional

from pydantic import ConfigDict, StrictBool, StrictStr

from ..common_structures import (
    Position,
    Range,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    UInteger,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class FormattingOptions(LspModel):
    """
    Value-object describing what options formatting should use. Properties
    beyond the predefined ones are kept as extra attributes and written back
    unchanged.
    """

    model_config = ConfigDict(extra="allow")

    tab_size: UInteger = 0
    """
    Size of a tab in spaces.
    """
    insert_spaces: StrictBool = False
    """
    Prefer spaces over tabs.
    """
    trim_trailing_whitespace: Optional[StrictBool] = None
    insert_final_newline: Optional[StrictBool] = None
    trim_final_newlines: Optional[StrictBool] = None


class DocumentFormattingClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DocumentFormattingOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DocumentFormattingRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_formatting_options: Embedded[DocumentFormattingOptions]


class DocumentFormattingParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document to format.
    """
    options: FormattingOptions = FormattingOptions()
    """
    The format options.
    """


class DocumentRangeFormattingClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DocumentRangeFormattingOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class DocumentRangeFormattingRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_range_formatting_options: Embedded[DocumentRangeFormattingOptions]


class DocumentRangeFormattingParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    range: Range = Range()
    """
    The range to format
    """
    options: FormattingOptions = FormattingOptions()


class DocumentOnTypeFormattingClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class DocumentOnTypeFormattingOptions(LspModel):
    first_trigger_character: StrictStr = ""
    """
    A character on which formatting should be triggered, like `{`.
    """
    more_trigger_character: Optional[List[StrictStr]] = None
    """
    More trigger characters.
    """


class DocumentOnTypeFormattingRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_on_type_formatting_options: Embedded[DocumentOnTypeFormattingOptions]


class DocumentOnTypeFormattingParams(LspModel):
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    position: Position = Position()
    """
    The position around which the on type formatting should happen.
    """
    ch: StrictStr = ""
    """
    The character that has been typed that triggered the formatting
    on type request.
    """
    options: FormattingOptions = FormattingOptions()
