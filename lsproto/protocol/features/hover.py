from typing import List, Optional, Union

from pydantic import StrictBool, StrictStr

from ..common_structures import (
    MarkupContent,
    MarkupKind,
    Range,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel, variant


class HoverClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    content_format: Optional[List[MarkupKind]] = None
    """
    Client supports the following content formats if the content
    property refers to a `literal of type MarkupContent`.
    The order describes the preferred format of the client.
    """


class HoverOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class HoverRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    hover_options: Embedded[HoverOptions]


class HoverParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]


class MarkedString(LspModel):
    """
    @deprecated use MarkupContent instead.
    """

    language: StrictStr = ""
    value: StrictStr = ""


MarkedStringType = Union[StrictStr, MarkedString]


class Hover(LspModel):
    contents: Union[
        StrictStr,
        List[MarkedStringType],
        variant(MarkupContent, MarkedString),  # type: ignore
    ] = ""
    """
    The hover's content
    """
    range: Optional[Range] = None
    """
    An optional range is a range inside a text document
    that is used to visualize a hover, e.g. by changing the background color.
    """
