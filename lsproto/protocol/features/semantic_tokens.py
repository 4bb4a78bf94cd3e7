from typing import List, Optional, Union

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import StrEnum

from ..common_structures import (
    PartialResultParams,
    Range,
    StaticRegistrationOptions,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    UInteger,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class TokenFormat(StrEnum):
    RELATIVE = "relative"


class SemanticTokensLegend(LspModel):
    token_types: List[StrictStr] = Field(default_factory=list)
    """
    The token types a server uses.
    """
    token_modifiers: List[StrictStr] = Field(default_factory=list)
    """
    The token modifiers a server uses.
    """


class SemanticTokensRangeOptions(LspModel):
    pass


class SemanticTokensFullOptions(LspModel):
    delta: Optional[StrictBool] = None
    """
    The server supports deltas for full documents.
    """


class SemanticTokensClientCapabilitiesRequests(LspModel):
    range: Optional[Union[StrictBool, SemanticTokensRangeOptions]] = None
    """
    The client will send the `textDocument/semanticTokens/range` request
    if the server provides a corresponding handler.
    """
    full: Optional[Union[StrictBool, SemanticTokensFullOptions]] = None
    """
    The client will send the `textDocument/semanticTokens/full` request
    if the server provides a corresponding handler.
    """


class SemanticTokensClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    requests: SemanticTokensClientCapabilitiesRequests = (
        SemanticTokensClientCapabilitiesRequests()
    )
    token_types: List[StrictStr] = Field(default_factory=list)
    token_modifiers: List[StrictStr] = Field(default_factory=list)
    formats: List[TokenFormat] = Field(default_factory=list)
    overlapping_token_support: Optional[StrictBool] = None
    multiline_token_support: Optional[StrictBool] = None
    server_cancel_support: Optional[StrictBool] = None
    augments_syntax_tokens: Optional[StrictBool] = None


class SemanticTokensWorkspaceClientCapabilities(LspModel):
    refresh_support: Optional[StrictBool] = None


class SemanticTokensOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    legend: SemanticTokensLegend = SemanticTokensLegend()
    """
    The legend used by the server
    """
    range: Optional[Union[StrictBool, SemanticTokensRangeOptions]] = None
    """
    Server supports providing semantic tokens for a specific range
    of a document.
    """
    full: Optional[Union[StrictBool, SemanticTokensFullOptions]] = None
    """
    Server supports providing semantic tokens for a full document.
    """


class SemanticTokensRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    semantic_tokens_options: Embedded[SemanticTokensOptions]
    static_registration_options: Embedded[StaticRegistrationOptions]


class SemanticTokensParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()


class SemanticTokens(LspModel):
    result_id: Optional[StrictStr] = None
    """
    An optional result id. If provided and clients support delta updating
    the client will include the result id in the next semantic token request.
    """
    data: List[UInteger] = Field(default_factory=list)
    """
    The actual tokens.
    """


class SemanticTokensPartialResult(LspModel):
    data: List[UInteger] = Field(default_factory=list)


class SemanticTokensDeltaParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    previous_result_id: StrictStr = ""
    """
    The result id of a previous response. The result Id can either point to
    a full response or a delta response depending on what was received last.
    """


class SemanticTokensEdit(LspModel):
    start: UInteger = 0
    """
    The start offset of the edit.
    """
    delete_count: UInteger = 0
    """
    The count of elements to remove.
    """
    data: Optional[List[UInteger]] = None
    """
    The elements to insert.
    """


class SemanticTokensDelta(LspModel):
    result_id: Optional[StrictStr] = None
    edits: List[SemanticTokensEdit] = Field(default_factory=list)
    """
    The semantic token edits to transform a previous result into a new
    result.
    """


class SemanticTokensRangeParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    range: Range = Range()
    """
    The range the semantic tokens are requested for.
    """
