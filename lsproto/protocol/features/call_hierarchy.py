from typing import Any, List, Optional

from pydantic import Field, StrictBool, StrictStr

from ..common_structures import (
    DocumentUri,
    PartialResultParams,
    Range,
    StaticRegistrationOptions,
    SymbolKind,
    SymbolTag,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class CallHierarchyClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class CallHierarchyOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class CallHierarchyRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    call_hierarchy_options: Embedded[CallHierarchyOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class CallHierarchyPrepareParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]


class CallHierarchyItem(LspModel):
    name: StrictStr = ""
    """
    The name of this item.
    """
    kind: SymbolKind = SymbolKind(0)
    """
    The kind of this item.
    """
    tags: Optional[List[SymbolTag]] = None
    detail: Optional[StrictStr] = None
    """
    More detail for this item, e.g. the signature of a function.
    """
    uri: DocumentUri = ""
    range: Range = Range()
    """
    The range enclosing this symbol not including leading/trailing whitespace
    but everything else, e.g. comments and code.
    """
    selection_range: Range = Range()
    """
    The range that should be selected and revealed when this symbol is being
    picked, e.g. the name of a function. Must be contained by the `range`.
    """
    data: Optional[Any] = None
    """
    A data entry field that is preserved between a call hierarchy prepare and
    incoming calls or outgoing calls requests.
    """


class CallHierarchyIncomingCallsParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    item: CallHierarchyItem = CallHierarchyItem()


class CallHierarchyIncomingCall(LspModel):
    from_: CallHierarchyItem = Field(CallHierarchyItem(), alias="from")
    """
    The item that makes the call.
    """
    from_ranges: List[Range] = Field(default_factory=list)
    """
    The ranges at which the calls appear. This is relative to the caller
    denoted by `from`.
    """


class CallHierarchyOutgoingCallsParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    item: CallHierarchyItem = CallHierarchyItem()


class CallHierarchyOutgoingCall(LspModel):
    to: CallHierarchyItem = CallHierarchyItem()
    """
    The item that is called.
    """
    from_ranges: List[Range] = Field(default_factory=list)
    """
    The range at which this item is called. This is the range relative to
    the caller, e.g the item passed to `callHierarchy/outgoingCalls` request.
    """
