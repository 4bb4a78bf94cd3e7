from typing import Any, List, Optional

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum, StrEnum

from ..common_structures import (
    Command,
    Diagnostic,
    PartialResultParams,
    Range,
    TextDocumentIdentifier,
    TextDocumentRegistrationOptions,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
    WorkspaceEdit,
)
from ..lsp_data_model import Embedded, LspModel


class CodeActionKind(StrEnum):
    EMPTY = ""
    QUICK_FIX = "quickfix"
    REFACTOR = "refactor"
    REFACTOR_EXTRACT = "refactor.extract"
    REFACTOR_INLINE = "refactor.inline"
    REFACTOR_REWRITE = "refactor.rewrite"
    SOURCE = "source"
    SOURCE_ORGANIZE_IMPORTS = "source.organizeImports"
    SOURCE_FIX_ALL = "source.fixAll"


class CodeActionTriggerKind(OpenIntEnum):
    INVOKED = 1
    """
    Code actions were explicitly requested by the user or by an extension.
    """
    AUTOMATIC = 2
    """
    Code actions were requested automatically.

    This typically happens when current selection in a file changes, but can
    also be triggered when file content changes.
    """


class CodeActionKindValueSet(LspModel):
    value_set: List[CodeActionKind] = Field(default_factory=list)


class CodeActionLiteralSupport(LspModel):
    code_action_kind: CodeActionKindValueSet = CodeActionKindValueSet()


class CodeActionResolveSupport(LspModel):
    properties: List[StrictStr] = Field(default_factory=list)


class CodeActionClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    code_action_literal_support: Optional[CodeActionLiteralSupport] = None
    """
    The client supports code action literals as a valid
    response of the `textDocument/codeAction` request.
    """
    is_preferred_support: Optional[StrictBool] = None
    disabled_support: Optional[StrictBool] = None
    data_support: Optional[StrictBool] = None
    resolve_support: Optional[CodeActionResolveSupport] = None
    honors_change_annotations: Optional[StrictBool] = None


class CodeActionOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    code_action_kinds: Optional[List[CodeActionKind]] = None
    """
    CodeActionKinds that this server may return.

    The list of kinds may be generic, such as `CodeActionKind.Refactor`,
    or the server may list out every specific kind they provide.
    """
    resolve_provider: Optional[StrictBool] = None
    """
    The server provides support to resolve additional
    information for a code action.
    """


class CodeActionRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    code_action_options: Embedded[CodeActionOptions]


class CodeActionContext(LspModel):
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    """
    An array of diagnostics known on the client side overlapping the range
    provided to the `textDocument/codeAction` request.
    """
    only: Optional[List[CodeActionKind]] = None
    """
    Requested kind of actions to return.
    """
    trigger_kind: Optional[CodeActionTriggerKind] = None


class CodeActionParams(LspModel):
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The document in which the command was invoked.
    """
    range: Range = Range()
    """
    The range for which the command was invoked.
    """
    context: CodeActionContext = CodeActionContext()


class CodeActionDisabled(LspModel):
    reason: StrictStr = ""
    """
    Human readable description of why the code action is currently
    disabled.
    """


class CodeAction(LspModel):
    title: StrictStr = ""
    """
    A short, human-readable, title for this code action.
    """
    kind: Optional[CodeActionKind] = None
    diagnostics: Optional[List[Diagnostic]] = None
    is_preferred: Optional[StrictBool] = None
    disabled: Optional[CodeActionDisabled] = None
    edit: Optional[WorkspaceEdit] = None
    command: Optional[Command] = None
    data: Optional[Any] = None
