from typing import Any, List, Optional, Union

from pydantic import Field, StrictBool, StrictStr

from lsproto.utils import OpenIntEnum

from ..common_structures import (
    Command,
    MarkupContent,
    MarkupKind,
    PartialResultParams,
    Range,
    TextDocumentPositionParams,
    TextDocumentRegistrationOptions,
    TextEdit,
    WorkDoneProgressOptions,
    WorkDoneProgressParams,
)
from ..lsp_data_model import Embedded, LspModel, variant


class CompletionItemKind(OpenIntEnum):
    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


class CompletionItemTag(OpenIntEnum):
    DEPRECATED = 1
    """
    Render a completion as obsolete, usually using a strike-out.
    """


class InsertTextFormat(OpenIntEnum):
    PLAIN_TEXT = 1
    """
    The primary text to be inserted is treated as a plain string.
    """
    SNIPPET = 2
    """
    The primary text to be inserted is treated as a snippet.
    """


class InsertTextMode(OpenIntEnum):
    AS_IS = 1
    """
    The insertion or replace strings is taken as it is. If the
    value is multi line the lines below the cursor will be
    inserted using the indentation defined in the string value.
    The client will not apply any kind of adjustments to the
    string.
    """
    ADJUST_INDENTATION = 2
    """
    The editor adjusts leading whitespace of new lines so that
    they match the indentation up to the cursor of the line for
    which the item is accepted.
    """


class CompletionTriggerKind(OpenIntEnum):
    INVOKED = 1
    """
    Completion was triggered by typing an identifier (24x7 code
    complete), manual invocation (e.g Ctrl+Space) or via API.
    """
    TRIGGER_CHARACTER = 2
    """
    Completion was triggered by a trigger character specified by
    the `triggerCharacters` properties of the
    `CompletionRegistrationOptions`.
    """
    TRIGGER_FOR_INCOMPLETE_COMPLETIONS = 3
    """
    Completion was re-triggered as the current completion list is incomplete.
    """


class CompletionItemTagSupport(LspModel):
    value_set: List[CompletionItemTag] = Field(default_factory=list)


class CompletionItemResolveSupport(LspModel):
    properties: List[StrictStr] = Field(default_factory=list)


class CompletionItemInsertTextModeSupport(LspModel):
    value_set: List[InsertTextMode] = Field(default_factory=list)


class CompletionClientCapabilitiesCompletionItem(LspModel):
    snippet_support: Optional[StrictBool] = None
    commit_characters_support: Optional[StrictBool] = None
    documentation_format: Optional[List[MarkupKind]] = None
    deprecated_support: Optional[StrictBool] = None
    preselect_support: Optional[StrictBool] = None
    tag_support: Optional[CompletionItemTagSupport] = None
    insert_replace_support: Optional[StrictBool] = None
    resolve_support: Optional[CompletionItemResolveSupport] = None
    insert_text_mode_support: Optional[CompletionItemInsertTextModeSupport] = None
    label_details_support: Optional[StrictBool] = None


class CompletionClientCapabilitiesCompletionItemKind(LspModel):
    value_set: Optional[List[CompletionItemKind]] = None


class CompletionListCapabilities(LspModel):
    item_defaults: Optional[List[StrictStr]] = None


class CompletionClientCapabilities(LspModel):
    dynamic_registration: Optional[StrictBool] = None
    completion_item: Optional[CompletionClientCapabilitiesCompletionItem] = None
    completion_item_kind: Optional[CompletionClientCapabilitiesCompletionItemKind] = None
    context_support: Optional[StrictBool] = None
    """
    The client supports to send additional context information for a
    `textDocument/completion` request.
    """
    insert_text_mode: Optional[InsertTextMode] = None
    completion_list: Optional[CompletionListCapabilities] = None


class CompletionOptionsCompletionItem(LspModel):
    label_details_support: Optional[StrictBool] = None


class CompletionOptions(LspModel):
    work_done_progress_options: Embedded[WorkDoneProgressOptions]
    resolve_provider: Optional[StrictBool] = None
    """
    The server provides support to resolve additional
    information for a completion item.
    """
    trigger_characters: Optional[List[StrictStr]] = None
    """
    The additional characters, beyond the defaults provided by the client (typically
    [a-zA-Z]), that should automatically trigger a completion request.
    """
    all_commit_characters: Optional[List[StrictStr]] = None
    """
    The list of all possible characters that commit a completion.
    """
    completion_item: Optional[CompletionOptionsCompletionItem] = None


class CompletionRegistrationOptions(LspModel):
    text_document_registration_options: Embedded[TextDocumentRegistrationOptions]
    completion_options: Embedded[CompletionOptions]


class CompletionContext(LspModel):
    trigger_kind: CompletionTriggerKind = CompletionTriggerKind(0)
    """
    How the completion was triggered.
    """
    trigger_character: Optional[StrictStr] = None
    """
    The trigger character (a single character) that has trigger code
    complete. Is undefined if
    `triggerKind !== CompletionTriggerKind.TriggerCharacter`
    """


class CompletionParams(LspModel):
    text_document_position_params: Embedded[TextDocumentPositionParams]
    work_done_progress_params: Embedded[WorkDoneProgressParams]
    partial_result_params: Embedded[PartialResultParams]
    context: Optional[CompletionContext] = None
    """
    The completion context. This is only available if the client specifies
    to send this using the client capability
    `completion.contextSupport === true`
    """


class InsertReplaceEdit(LspModel):
    new_text: StrictStr = ""
    """
    The string to be inserted.
    """
    insert: Range = Range()
    """
    The range if the insert is requested
    """
    replace: Range = Range()
    """
    The range if the replace is requested.
    """


class CompletionItemLabelDetails(LspModel):
    detail: Optional[StrictStr] = None
    description: Optional[StrictStr] = None


CompletionTextEdit = variant(InsertReplaceEdit, TextEdit)


class CompletionItem(LspModel):
    label: StrictStr = ""
    """
    The label of this completion item.
    """
    label_details: Optional[CompletionItemLabelDetails] = None
    kind: Optional[CompletionItemKind] = None
    tags: Optional[List[CompletionItemTag]] = None
    detail: Optional[StrictStr] = None
    """
    A human-readable string with additional information
    about this item, like type or symbol information.
    """
    documentation: Optional[Union[StrictStr, MarkupContent]] = None
    deprecated: Optional[StrictBool] = None
    """
    @deprecated Use `tags` instead if supported.
    """
    preselect: Optional[StrictBool] = None
    sort_text: Optional[StrictStr] = None
    filter_text: Optional[StrictStr] = None
    insert_text: Optional[StrictStr] = None
    insert_text_format: Optional[InsertTextFormat] = None
    insert_text_mode: Optional[InsertTextMode] = None
    text_edit: Optional[CompletionTextEdit] = None
    text_edit_text: Optional[StrictStr] = None
    additional_text_edits: Optional[List[TextEdit]] = None
    commit_characters: Optional[List[StrictStr]] = None
    command: Optional[Command] = None
    data: Optional[Any] = None
    """
    A data entry field that is preserved on a completion item between
    a completion and a completion resolve request.
    """


class CompletionList(LspModel):
    is_incomplete: StrictBool = False
    """
    This list is not complete. Further typing should result in recomputing
    this list.
    """
    items: List[CompletionItem] = Field(default_factory=list)
