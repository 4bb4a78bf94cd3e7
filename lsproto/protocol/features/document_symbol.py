from typing import List, Optional

from pydantic import StrictBool, StrictStr

from ..common_structures import (
    PartialResultParams,
    Range,
    SymbolKind,
    SymbolKindClientCapabilities,
    SymbolTag,
    SymbolTagSupportClientCapabilities,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class DocumentSymbolClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether document symbol supports dynamic registration.
    """
    symbol_kind: Optional[SymbolKindClientCapabilities] = None
    """
    Specific capabilities for the `SymbolKind` in the
    `textDocument/documentSymbol` request.
    """
    hierarchical_document_symbol_support: Optional[StrictBool] = None
    """
    The client supports hierarchical document symbols.
    """
    tag_support: Optional[SymbolTagSupportClientCapabilities] = None
    label_support: Optional[StrictBool] = None
    """
    The client supports an additional label presented in the UI when
    registering a document symbol provider.
    """


class DocumentSymbolOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    label: Optional[StrictStr] = None
    """
    A human-readable string that is shown when multiple outlines trees
    are shown for the same document.
    """


class DocumentSymbolRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_symbol_options: Embedded[DocumentSymbolOptions]


class DocumentSymbolParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The text document.
    """


class DocumentSymbol(LspModel):
    """
    Represents programming constructs like variables, classes, interfaces etc.
    that appear in a document. Document symbols can be hierarchical and they
    have two ranges: one that encloses its definition and one that points to its
    most interesting range, e.g. the range of an identifier.
    """

    name: StrictStr = ""
    detail: Optional[StrictStr] = None
    kind: SymbolKind = SymbolKind(0)
    tags: Optional[List[SymbolTag]] = None
    deprecated: Optional[StrictBool] = None
    range: Range = Range()
    """
    The range enclosing this symbol not including leading/trailing whitespace
    but everything else like comments.
    """
    selection_range: Range = Range()
    """
    The range that should be selected and revealed when this symbol is being
    picked, e.g. the name of a function. Must be contained by the `range`.
    """
    children: Optional[List["DocumentSymbol"]] = None
