from typing import List, Optional, Union

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum

from .common_structures import (
    Range,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentRegistrationOptions,
    UInteger,
    VersionedTextDocumentIdentifier,
)
from .lsp_data_model import Embedded, LspModel


class TextDocumentSyncKind(OpenIntEnum):
    NONE = 0
    """
    Documents should not be synced at all.
    """
    FULL = 1
    """
    Documents are synced by always sending the full content
    of the document.
    """
    INCREMENTAL = 2
    """
    Documents are synced by sending the full content on open.
    After that only incremental updates to the document are
    send.
    """


class SaveOptions(LspModel):
    include_text: Optional[StrictBool] = None
    """
    The client is supposed to include the content on save.
    """


class TextDocumentSyncOptions(LspModel):
    open_close: Optional[StrictBool] = None
    """
    Open and close notifications are sent to the server. If omitted open
    close notification should not be sent.
    """
    change: Optional[TextDocumentSyncKind] = None
    """
    Change notifications are sent to the server. See
    TextDocumentSyncKind.None, TextDocumentSyncKind.Full and
    TextDocumentSyncKind.Incremental. If omitted it defaults to
    TextDocumentSyncKind.None.
    """
    will_save: Optional[StrictBool] = None
    will_save_wait_until: Optional[StrictBool] = None
    save: Optional[Union[StrictBool, SaveOptions]] = None
    """
    If present save notifications are sent to the server. If omitted the
    notification should not be sent.
    """


class TextDocumentSyncClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    will_save: Optional[StrictBool] = None
    will_save_wait_until: Optional[StrictBool] = None
    did_save: Optional[StrictBool] = None


class DidOpenTextDocumentParams(LspModel):
    text_document: TextDocumentItem = TextDocumentItem()
    """
    The document that was opened.
    """


class TextDocumentChangeRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    sync_kind: TextDocumentSyncKind = TextDocumentSyncKind.NONE
    """
    How documents are synced to the server.
    """


class TextDocumentContentChangeEvent(LspModel):
    range: Optional[Range] = None
    """
    The range of the document that changed. Absent when the event carries
    the full content of the document.
    """
    range_length: Optional[UInteger] = None
    """
    The optional length of the range that got replaced.

    @deprecated use range instead.
    """
    text: StrictStr = ""
    """
    The new text for the provided range, or the full content of the document.
    """


class DidChangeTextDocumentParams(LspModel):
    text_document: VersionedTextDocumentIdentifier = VersionedTextDocumentIdentifier()
    content_changes: List[TextDocumentContentChangeEvent] = Field(
        default_factory=list
    )


class TextDocumentSaveReason(OpenIntEnum):
    MANUAL = 1
    AFTER_DELAY = 2
    FOCUS_OUT = 3


class WillSaveTextDocumentParams(LspModel):
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    reason: TextDocumentSaveReason = TextDocumentSaveReason(0)


class TextDocumentSaveRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    include_text: Optional[StrictBool] = None
    """
    The client is supposed to include the content on save.
    """


class DidSaveTextDocumentParams(LspModel):
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document that was saved.
    """
    text: Optional[StrictStr] = None
    """
    Optional the content when saved. Depends on the includeText value
    when the save notification was requested.
    """


class DidCloseTextDocumentParams(LspModel):
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document that was closed.
    """
