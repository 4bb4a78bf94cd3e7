from typing import Any, List, Optional

from pydantic import StrictBool, StrictStr

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


class TypeHierarchyClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class TypeHierarchyOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class TypeHierarchyRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    type_hierarchy_options: Embedded[TypeHierarchyOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class TypeHierarchyPrepareParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]


class TypeHierarchyItem(LspModel):
    name: StrictStr = ""
    """
    The name of this item.
    """
    kind: SymbolKind = SymbolKind(0)
    """
    The kind of this item.
    """
    tags: Optional[List[SymbolTag]] = None
    """
    Tags for this item.
    """
    detail: Optional[StrictStr] = None
    """
    More detail for this item, e.g. the signature of a function.
    """
    uri: DocumentUri = ""
    """
    The resource identifier of this item.
    """
    range: Range = Range()
    """
    The range enclosing this symbol not including leading/trailing whitespace
    but everything else, e.g. comments and code.
    """
    selection_range: Range = Range()
    """
    The range that should be selected and revealed when this symbol is being
    picked, e.g. the name of a function. Must be contained by the
    [`range`](#TypeHierarchyItem.range).
    """
    data: Optional[Any] = None
    """
    A data entry field that is preserved between a type hierarchy prepare and
    supertypes or subtypes requests. It could also be used to identify the
    type hierarchy in the server, helping improve the performance on
    resolving supertypes and subtypes.
    """


class TypeHierarchySupertypesParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    item: TypeHierarchyItem = TypeHierarchyItem()


class TypeHierarchySubtypesParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    item: TypeHierarchyItem = TypeHierarchyItem()
