from typing import Optional

from pydantic import StrictBool, StrictStr

from lsproto.utils import StrEnum

from ..common_structures import (
    PartialResultParams,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel


class UniquenessLevel(StrEnum):
    """
    Moniker uniqueness level to define scope of the moniker.
    """

    DOCUMENT = "document"
    PROJECT = "project"
    GROUP = "group"
    SCHEME = "scheme"
    GLOBAL = "global"


class MonikerKind(StrEnum):
    IMPORT = "import"
    """
    The moniker represent a symbol that is imported into a project
    """
    EXPORT = "export"
    """
    The moniker represents a symbol that is exported from a project
    """
    LOCAL = "local"
    """
    The moniker represents a symbol that is local to a project (e.g. a local
    variable of a function, a class not visible outside the project, ...)
    """


class MonikerClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None


class MonikerOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]


class MonikerRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    moniker_options: Embedded[MonikerOptions]


class MonikerParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]


class Moniker(LspModel):
    scheme: StrictStr = ""
    """
    The scheme of the moniker. For example tsc or .Net
    """
    identifier: StrictStr = ""
    """
    The identifier of the moniker. The value is opaque in LSIF however
    schema owners are allowed to define the structure if they want.
    """
    unique: UniquenessLevel = UniquenessLevel.DOCUMENT
    """
    The scope in which the moniker is unique
    """
    kind: Optional[MonikerKind] = None
    """
    The moniker kind if known.
    """
