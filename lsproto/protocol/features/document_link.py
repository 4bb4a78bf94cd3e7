from typing import Any, Optional

from pydantic import StrictBool, StrictStr

from ..common_structures import (
    URI,
    PartialResultParams,
    Range,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class DocumentLinkClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    """
    Whether document link supports dynamic registration.
    """
    tooltip_support: Optional[StrictBool] = None
    """
    Whether the client supports the `tooltip` property on `DocumentLink`.
    """


class DocumentLinkOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    resolve_provider: Optional[StrictBool] = None
    """
    Document links have a resolve provider as well.
    """


class DocumentLinkRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    document_link_options: Embedded[DocumentLinkOptions]


class DocumentLinkParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document to provide document links for.
    """


class DocumentLink(LspModel):
    range: Range = Range()
    """
    The range this link applies to.
    """
    target: Optional[URI] = None
    """
    The uri this link points to. If missing a resolve request is sent later.
    """
    tooltip: Optional[StrictStr] = None
    data: Optional[Any] = None
