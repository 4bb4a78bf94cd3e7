from typing import Any, Optional

from pydantic import StrictBool

from ..common_structures import (
    Command,
    PartialResultParams,
    Range,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class CodeLensClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class CodeLensWorkspaceClientCapabilities(LspModel):
    refresh_support: Optional[StrictBool] = None
    """
    Whether the client implementation supports a refresh request sent from the
    server to the client.
    """


class CodeLensOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    resolve_provider: Optional[StrictBool] = None
    """
    Code lens has a resolve provider as well.
    """


class CodeLensRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    code_lens_options: Embedded[CodeLensOptions]


class CodeLensParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document to request code lens for.
    """


class CodeLens(LspModel):
    range: Range = Range()
    """
    The range in which this code lens is valid. Should only span a single line.
    """
    command: Optional[Command] = None
    """
    The command this code lens represents.
    """
    data: Optional[Any] = None
    """
    A data entry field that is preserved on a code lens item between
    a code lens and a code lens resolve request.
    """
