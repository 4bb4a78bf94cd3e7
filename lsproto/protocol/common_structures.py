from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    ConfigDict,
    Discriminator,
    Field,
    RootModel,
    StrictBool,
    StrictInt,
    StrictStr,
    Tag,
    model_validator,
)
from typing_extensions import Annotated

from lsproto.utils import OpenIntEnum, StrEnum

from .lsp_data_model import Embedded, LspModel, Nullable, variant
from .utils.uri import parse_uri


def _check_uri(value: str) -> str:
    # the empty string is the zero value of a required URI
    if value == "":
        return value
    return parse_uri(value)


DocumentUri = Annotated[StrictStr, AfterValidator(_check_uri)]
URI = Annotated[StrictStr, AfterValidator(_check_uri)]
ChangeAnnotationIdentifier = StrictStr
UInteger = Annotated[StrictInt, Field(ge=0)]


class ProgressToken(RootModel[Union[StrictInt, StrictStr]]):
    """
    Token correlating progress or partial result notifications with the request
    that asked for them. Encoded as a JSON string or number, whichever it was
    created from.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class Position(LspModel):
    line: UInteger = 0
    """
    Line position in a document (zero-based).
    """
    character: UInteger = 0
    """
    Character offset on a line in a document (zero-based), counted in UTF-16
    code units.
    """

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.character) < (other.line, other.character)

    def __le__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.character) <= (other.line, other.character)

    def __gt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.character) > (other.line, other.character)

    def __ge__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.character) >= (other.line, other.character)


class Range(LspModel):
    start: Position = Position()
    """
    The range's start position.
    """
    end: Position = Position()
    """
    The range's end position.
    """

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.end < self.start:
            raise ValueError(
                f"Range end ({self.end.line}:{self.end.character}) is before "
                f"its start ({self.start.line}:{self.start.character})"
            )
        return self


class Location(LspModel):
    """
    Represents a location inside a resource, such as a line inside a text file.
    """

    uri: DocumentUri = ""
    range: Range = Range()


class LocationLink(LspModel):
    origin_selection_range: Optional[Range] = None
    """
    Span of the origin of this link.
    Used as the underlined span for mouse interaction.
    Defaults to the word range at the mouse position.
    """
    target_uri: DocumentUri = ""
    """
    The target resource identifier of this link.
    """
    target_range: Range = Range()
    """
    The full target range of this link.
    """
    target_selection_range: Range = Range()
    """
    The range that should be selected and revealed when this link is being followed,
    e.g the name of a function. Must be contained by the the `target_range`.
    """


class TextDocumentIdentifier(LspModel):
    uri: DocumentUri = ""
    """
    The text document's URI.
    """


class VersionedTextDocumentIdentifier(LspModel):
    text_document_identifier: Embedded[TextDocumentIdentifier]
    version: StrictInt = 0
    """
    The version number of this document.
    The version number of a document will increase after each change,
    including undo/redo. The number doesn't need to be consecutive.
    """


class OptionalVersionedTextDocumentIdentifier(LspModel):
    text_document_identifier: Embedded[TextDocumentIdentifier]
    version: Nullable[StrictInt] = None
    """
    The version number of this document. `null` when the server edits a file
    the client has not opened, meaning the content on disk is the master.
    """


class TextDocumentItem(LspModel):
    uri: DocumentUri = ""
    language_id: StrictStr = ""
    version: StrictInt = 0
    text: StrictStr = ""


class TextDocumentPositionParams(LspModel):
    text_document: TextDocumentIdentifier = TextDocumentIdentifier()
    """
    The text document.
    """
    position: Position = Position()
    """
    The position inside the text document.
    """


class DocumentFilter(LspModel):
    language: Optional[StrictStr] = None
    """
    A language id, like `typescript`.
    """
    scheme: Optional[StrictStr] = None
    """
    A Uri [scheme](#Uri.scheme), like `file` or `untitled`.
    """
    pattern: Optional[StrictStr] = None
    """
    A glob pattern, like `*.{ts,js}`.
    """


DocumentSelector = List[DocumentFilter]


class StaticRegistrationOptions(LspModel):
    id: Optional[StrictStr] = None
    """
    The id used to register the request. The id can be used to deregister
    the request again. See also Registration#id.
    """


class TextDocumentRegistrationOptions(LspModel):
    document_selector: Nullable[DocumentSelector] = Field(default_factory=list)
    """
    A document selector to identify the scope of the registration. If set to
    null the document selector provided on the client side will be used.
    """


class WorkDoneProgressOptions(LspModel):
    work_done_progress: Optional[StrictBool] = None


class WorkDoneProgressParams(LspModel):
    work_done_token: Optional[ProgressToken] = None
    """
    An optional token that a server can use to report work done progress.
    """


class PartialResultParams(LspModel):
    partial_result_token: Optional[ProgressToken] = None
    """
    An optional token that a server can use to report partial results (e.g.
    streaming) to the client.
    """


class MarkupKind(StrEnum):
    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


class MarkupContent(LspModel):
    kind: MarkupKind = MarkupKind.PLAINTEXT
    value: StrictStr = ""


class Command(LspModel):
    title: StrictStr = ""
    """
    Title of the command, like `save`.
    """
    command: StrictStr = ""
    """
    The identifier of the actual command handler.
    """
    arguments: Optional[List[Any]] = None


class TextEdit(LspModel):
    range: Range = Range()
    """
    The range of the text document to be manipulated.
    To insert text into a document create a range where start == end.
    """
    new_text: StrictStr = ""
    """
    The text to be inserted. For delete operations use an empty string.
    """


class ChangeAnnotation(LspModel):
    label: StrictStr = ""
    needs_confirmation: Optional[StrictBool] = None
    description: Optional[StrictStr] = None


class AnnotatedTextEdit(LspModel):
    text_edit: Embedded[TextEdit]
    annotation_id: ChangeAnnotationIdentifier = ""
    """
    The actual annotation identifier.
    """


TextEditVariant = variant(AnnotatedTextEdit, TextEdit)


class TextDocumentEdit(LspModel):
    text_document: OptionalVersionedTextDocumentIdentifier = (
        OptionalVersionedTextDocumentIdentifier()
    )
    edits: List[TextEditVariant] = Field(default_factory=list)


class CreateFileOptions(LspModel):
    overwrite: Optional[StrictBool] = None
    """
    Overwrite existing file. Overwrite wins over `ignoreIfExists`
    """
    ignore_if_exists: Optional[StrictBool] = None


class CreateFile(LspModel):
    kind: Literal["create"] = "create"
    uri: DocumentUri = ""
    options: Optional[CreateFileOptions] = None
    annotation_id: Optional[ChangeAnnotationIdentifier] = None


class RenameFileOptions(LspModel):
    overwrite: Optional[StrictBool] = None
    ignore_if_exists: Optional[StrictBool] = None


class RenameFile(LspModel):
    kind: Literal["rename"] = "rename"
    old_uri: DocumentUri = ""
    new_uri: DocumentUri = ""
    options: Optional[RenameFileOptions] = None
    annotation_id: Optional[ChangeAnnotationIdentifier] = None


class DeleteFileOptions(LspModel):
    recursive: Optional[StrictBool] = None
    ignore_if_not_exists: Optional[StrictBool] = None


class DeleteFile(LspModel):
    kind: Literal["delete"] = "delete"
    uri: DocumentUri = ""
    options: Optional[DeleteFileOptions] = None
    annotation_id: Optional[ChangeAnnotationIdentifier] = None


def _document_change_kind(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        kind = value.get("kind")
        if kind is None:
            return "edit"
        return kind if kind in {"create", "rename", "delete"} else None
    if isinstance(value, TextDocumentEdit):
        return "edit"
    return getattr(value, "kind", None)


DocumentChange = Annotated[
    Union[
        Annotated[TextDocumentEdit, Tag("edit")],
        Annotated[CreateFile, Tag("create")],
        Annotated[RenameFile, Tag("rename")],
        Annotated[DeleteFile, Tag("delete")],
    ],
    Discriminator(_document_change_kind),
]


class WorkspaceEdit(LspModel):
    changes: Optional[Dict[DocumentUri, List[TextEdit]]] = None
    """
    Holds changes to existing resources.
    """
    document_changes: Optional[List[DocumentChange]] = None
    """
    Either an array of `TextDocumentEdit`s or, when the client supports
    `workspace.workspaceEdit.resourceOperations`, `TextDocumentEdit`s mixed
    with create, rename and delete file / folder operations.
    """
    change_annotations: Optional[Dict[ChangeAnnotationIdentifier, ChangeAnnotation]] = None
    """
    A map of change annotations that can be referenced in
    `AnnotatedTextEdit`s or create, rename, delete file / folder
    operations.

    @since 3.16.0
    """


class DiagnosticSeverity(OpenIntEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticTag(OpenIntEnum):
    UNNECESSARY = 1
    """
    Unused or unnecessary code
    """
    DEPRECATED = 2
    """
    Deprecated or obsolete code
    """


class DiagnosticRelatedInformation(LspModel):
    location: Location = Location()
    message: StrictStr = ""


class CodeDescription(LspModel):
    href: URI = ""
    """
    URI to open with more info.
    """


class Diagnostic(LspModel):
    range: Range = Range()
    """
    The range at which the message applies.
    """
    severity: Optional[DiagnosticSeverity] = None
    """
    The diagnostic's severity. If omitted it is up to the client to interpret
    diagnostics as error, warning, info or hint.
    """
    code: Optional[Union[StrictInt, StrictStr]] = None
    code_description: Optional[CodeDescription] = None
    source: Optional[StrictStr] = None
    """
    A human-readable string describing the source of this diagnostic, e.g.
    'typescript' or 'super lint'.
    """
    message: StrictStr = ""
    tags: Optional[List[DiagnosticTag]] = None
    related_information: Optional[List[DiagnosticRelatedInformation]] = None
    data: Optional[Any] = None
    """
    A data entry field that is preserved between a
    `textDocument/publishDiagnostics` notification and a
    `textDocument/codeAction` request.
    """


class RegularExpressionsClientCapabilities(LspModel):
    engine: StrictStr = ""
    version: Optional[StrictStr] = None


class MarkdownClientCapabilities(LspModel):
    parser: StrictStr = ""
    version: Optional[StrictStr] = None
    allowed_tags: Optional[List[StrictStr]] = None


class SymbolKind(OpenIntEnum):
    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


class SymbolTag(OpenIntEnum):
    DEPRECATED = 1


class SymbolKindClientCapabilities(LspModel):
    value_set: Optional[List[SymbolKind]] = None
    """
    The symbol kind values the client supports. When this
    property exists the client also guarantees that it will
    handle values outside its set gracefully and falls back
    to a default value when unknown.
    """


class SymbolTagSupportClientCapabilities(LspModel):
    value_set: List[SymbolTag] = Field(default_factory=list)
    """
    The tags supported by the client.
    """


class SymbolInformation(LspModel):
    """
    Represents information about programming constructs like variables, classes,
    interfaces etc.
    """

    name: StrictStr = ""
    kind: SymbolKind = SymbolKind(0)
    tags: Optional[List[SymbolTag]] = None
    deprecated: Optional[StrictBool] = None
    """
    @deprecated Use tags instead
    """
    location: Location = Location()
    container_name: Optional[StrictStr] = None
