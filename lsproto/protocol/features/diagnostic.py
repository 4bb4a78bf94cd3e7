from typing import List, Optional

from pydantic import Field, StrictBool, StrictInt

from ..common_structures import Diagnostic, DiagnosticTag, DocumentUri
from ..lsp_data_model import LspModel


class PublishDiagnosticsClientCapabilitiesTagSupport(LspModel):
    value_set: List[DiagnosticTag] = Field(default_factory=list)
    """
    The tags supported by the client.
    """


class PublishDiagnosticsClientCapabilities(LspModel):
    related_information: Optional[StrictBool] = None
    """
    Whether the clients accepts diagnostics with related information.
    """
    tag_support: Optional[PublishDiagnosticsClientCapabilitiesTagSupport] = None
    version_support: Optional[StrictBool] = None
    """
    Whether the client interprets the version property of the
    `textDocument/publishDiagnostics` notification's parameter.
    """
    code_description_support: Optional[StrictBool] = None
    data_support: Optional[StrictBool] = None


class PublishDiagnosticsParams(LspModel):
    uri: DocumentUri = ""
    """
    The URI for which diagnostic information is reported.
    """
    version: Optional[StrictInt] = None
    """
    Optional the version number of the document the diagnostics are published
    for.
    """
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    """
    An array of diagnostic information items.
    """
