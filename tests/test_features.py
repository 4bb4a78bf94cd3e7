from typing import List

import pytest

from lsproto.protocol import DecodeError, decode, encode_str
from lsproto.protocol.common_structures import (
    DocumentFilter,
    Position,
    Range,
    SymbolKind,
    TextEdit,
)
from lsproto.protocol.features.call_hierarchy import (
    CallHierarchyIncomingCall,
    CallHierarchyItem,
)
from lsproto.protocol.features.code_action import (
    CodeAction,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
)
from lsproto.protocol.features.completion import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    CompletionTriggerKind,
    InsertReplaceEdit,
)
from lsproto.protocol.features.declaration import DeclarationRegistrationOptions
from lsproto.protocol.features.document_color import (
    Color,
    ColorInformation,
    DocumentColorRegistrationOptions,
)
from lsproto.protocol.features.document_link import DocumentLinkRegistrationOptions
from lsproto.protocol.features.document_symbol import (
    DocumentSymbol,
    DocumentSymbolOptions,
)
from lsproto.protocol.features.folding_range import FoldingRange, FoldingRangeKind
from lsproto.protocol.features.references import ReferenceContext, ReferenceParams
from lsproto.protocol.features.rename import (
    PrepareRenameDefaultBehavior,
    PrepareRenamePlaceholder,
    PrepareRenameResult,
)
from lsproto.protocol.features.selection_range import SelectionRange
from lsproto.protocol.features.semantic_tokens import (
    SemanticTokens,
    SemanticTokensDelta,
)
from lsproto.protocol.features.signature_help import (
    ParameterInformation,
    SignatureHelp,
    SignatureInformation,
)

GO_SELECTOR_JSON = '[{"language":"go","scheme":"file","pattern":"*"}]'


def _range(sl: int, sc: int, el: int, ec: int) -> Range:
    return Range(
        start=Position(line=sl, character=sc), end=Position(line=el, character=ec)
    )


def test_reference_params():
    data = (
        '{"textDocument":{"uri":"file:///path/to/basic.go"},'
        '"position":{"line":25,"character":1},'
        '"workDoneToken":"156edea9-9d8d-422f-b7ee-81a84594afbb",'
        '"partialResultToken":"dd134d84-c134-4d7a-a2a3-f8af3ef4a568",'
        '"context":{"includeDeclaration":true}}'
    )
    params = ReferenceParams(
        text_document={"uri": "file:///path/to/basic.go"},
        position=Position(line=25, character=1),
        work_done_token="156edea9-9d8d-422f-b7ee-81a84594afbb",
        partial_result_token="dd134d84-c134-4d7a-a2a3-f8af3ef4a568",
        context=ReferenceContext(include_declaration=True),
    )
    assert encode_str(params) == data

    decoded = decode(data, ReferenceParams)
    assert decoded == params
    assert decoded.text_document.uri == "file:///path/to/basic.go"
    assert decoded.position.line == 25
    assert decoded.context.include_declaration is True


def test_registration_key_order():
    declaration = DeclarationRegistrationOptions(
        work_done_progress=True,
        document_selector=[DocumentFilter(language="go", scheme="file", pattern="*")],
        id="1",
    )
    assert encode_str(declaration) == (
        '{"workDoneProgress":true,'
        f'"documentSelector":{GO_SELECTOR_JSON},'
        '"id":"1"}'
    )

    color = decode(
        '{"workDoneProgress":true,"id":"1",'
        f'"documentSelector":{GO_SELECTOR_JSON}}}',
        DocumentColorRegistrationOptions,
    )
    assert encode_str(color) == (
        f'{{"documentSelector":{GO_SELECTOR_JSON},"id":"1","workDoneProgress":true}}'
    )


def test_document_link_registration():
    options = DocumentLinkRegistrationOptions(
        document_selector=[DocumentFilter(language="go", scheme="file", pattern="*")],
        resolve_provider=True,
    )
    data = f'{{"documentSelector":{GO_SELECTOR_JSON},"resolveProvider":true}}'
    assert encode_str(options) == data
    assert decode(data, DocumentLinkRegistrationOptions) == options

    assert encode_str(DocumentLinkRegistrationOptions()) == '{"documentSelector":[]}'


def test_options():
    assert encode_str(
        CodeActionOptions(
            code_action_kinds=[CodeActionKind.QUICK_FIX, CodeActionKind.REFACTOR],
            resolve_provider=True,
        )
    ) == '{"codeActionKinds":["quickfix","refactor"],"resolveProvider":true}'
    assert encode_str(
        DocumentSymbolOptions(work_done_progress=True, label="testLabel")
    ) == '{"workDoneProgress":true,"label":"testLabel"}'


def test_code_action():
    params = decode(
        b'{"textDocument":{"uri":"file:///a.go"},'
        b'"range":{"start":{"line":1,"character":0},"end":{"line":1,"character":5}},'
        b'"context":{"diagnostics":[{"range":{"start":{"line":1,"character":0},'
        b'"end":{"line":1,"character":5}},"severity":1,"code":"E1","message":"bad"}],'
        b'"only":["quickfix"],"triggerKind":1}}',
        CodeActionParams,
    )
    diagnostic = params.context.diagnostics[0]
    assert diagnostic.code == "E1"
    assert diagnostic.severity == 1
    assert params.context.only == [CodeActionKind.QUICK_FIX]

    action = CodeAction(
        title="Fix",
        kind=CodeActionKind.QUICK_FIX,
        diagnostics=[diagnostic],
        is_preferred=True,
    )
    assert encode_str(action) == (
        '{"title":"Fix","kind":"quickfix","diagnostics":[{"range":{"start":'
        '{"line":1,"character":0},"end":{"line":1,"character":5}},"severity":1,'
        '"code":"E1","message":"bad"}],"isPreferred":true}'
    )

    with pytest.raises(DecodeError):
        decode(b'{"title":"Fix","kind":"refactor.move"}', CodeAction)


def test_completion():
    params = decode(
        b'{"textDocument":{"uri":"file:///a.go"},"position":{"line":1,"character":2},'
        b'"context":{"triggerKind":2,"triggerCharacter":"."}}',
        CompletionParams,
    )
    assert params.context.trigger_kind is CompletionTriggerKind.TRIGGER_CHARACTER
    assert params.partial_result_token is None

    completions = decode(
        b'{"isIncomplete":false,"items":['
        b'{"label":"a","kind":3,"textEdit":{"range":{"start":{"line":1,"character":1},'
        b'"end":{"line":1,"character":2}},"newText":"a()"}},'
        b'{"label":"b","kind":100,"textEdit":{"newText":"b",'
        b'"insert":{"start":{"line":1,"character":1},"end":{"line":1,"character":2}},'
        b'"replace":{"start":{"line":1,"character":1},"end":{"line":1,"character":4}}'
        b"}}]}",
        CompletionList,
    )
    first, second = completions.items
    assert first.kind is CompletionItemKind.FUNCTION
    assert first.text_edit == TextEdit(range=_range(1, 1, 1, 2), new_text="a()")
    assert second.kind == 100
    assert str(second.kind) == "100"
    assert second.text_edit == InsertReplaceEdit(
        new_text="b", insert=_range(1, 1, 1, 2), replace=_range(1, 1, 1, 4)
    )

    assert encode_str(CompletionItem(label="c")) == '{"label":"c"}'


def test_signature_help_parameter_label():
    signature_help = decode(
        b'{"signatures":[{"label":"f(a, b)","parameters":'
        b'[{"label":[2,3]},{"label":"b"}]}],"activeSignature":0}',
        SignatureHelp,
    )
    signature = signature_help.signatures[0]
    assert signature.parameters[0].label == (2, 3)
    assert signature.parameters[1].label == "b"
    assert signature_help == SignatureHelp(
        signatures=[
            SignatureInformation(
                label="f(a, b)",
                parameters=[
                    ParameterInformation(label=(2, 3)),
                    ParameterInformation(label="b"),
                ],
            )
        ],
        active_signature=0,
    )
    assert encode_str(signature_help) == (
        '{"signatures":[{"label":"f(a, b)","parameters":'
        '[{"label":[2,3]},{"label":"b"}]}],"activeSignature":0}'
    )

    with pytest.raises(DecodeError):
        decode(b'{"label":[-1,3]}', ParameterInformation)


def test_prepare_rename_result():
    placeholder = decode(
        b'{"range":{"start":{"line":0,"character":0},"end":{"line":0,"character":3}},'
        b'"placeholder":"foo"}',
        PrepareRenameResult,
    )
    assert placeholder == PrepareRenamePlaceholder(
        range=_range(0, 0, 0, 3), placeholder="foo"
    )

    default = decode(b'{"defaultBehavior":true}', PrepareRenameResult)
    assert default == PrepareRenameDefaultBehavior(default_behavior=True)

    plain = decode(
        b'{"start":{"line":0,"character":0},"end":{"line":0,"character":3}}',
        PrepareRenameResult,
    )
    assert plain == _range(0, 0, 0, 3)


def test_recursive_structures():
    symbol = DocumentSymbol(
        name="A",
        kind=SymbolKind.CLASS,
        range=_range(0, 0, 10, 0),
        selection_range=_range(0, 6, 0, 7),
        children=[
            DocumentSymbol(
                name="f",
                kind=SymbolKind.METHOD,
                range=_range(1, 4, 2, 0),
                selection_range=_range(1, 8, 1, 9),
            )
        ],
    )
    assert decode(encode_str(symbol), DocumentSymbol) == symbol

    selection = decode(
        b'{"range":{"start":{"line":1,"character":2},"end":{"line":1,"character":3}},'
        b'"parent":{"range":{"start":{"line":0,"character":0},'
        b'"end":{"line":5,"character":0}}}}',
        SelectionRange,
    )
    assert selection.parent.range == _range(0, 0, 5, 0)
    assert selection.parent.parent is None


def test_call_hierarchy_from_key():
    item = CallHierarchyItem(
        name="main",
        kind=SymbolKind.FUNCTION,
        uri="file:///a.go",
        range=_range(0, 0, 3, 1),
        selection_range=_range(0, 5, 0, 9),
    )
    call = CallHierarchyIncomingCall(from_=item, from_ranges=[_range(1, 1, 1, 5)])
    data = encode_str(call)
    assert data.startswith('{"from":{"name":"main","kind":12,')
    assert '"fromRanges":[' in data
    assert decode(data, CallHierarchyIncomingCall) == call


def test_folding_and_color():
    ranges = decode(
        b'[{"startLine":1,"endLine":5,"kind":"imports"},{"startLine":7,"endLine":9}]',
        List[FoldingRange],
    )
    assert ranges[0].kind is FoldingRangeKind.IMPORTS
    assert ranges[1].kind is None
    assert encode_str(ranges[1]) == '{"startLine":7,"endLine":9}'

    color = ColorInformation(
        range=_range(0, 0, 0, 7), color=Color(red=1.0, green=0.5, blue=0.0, alpha=1.0)
    )
    decoded = decode(encode_str(color), ColorInformation)
    assert decoded.color.green == 0.5
    assert decoded == color

    with pytest.raises(DecodeError):
        decode(b'{"red":"0.5","green":0,"blue":0,"alpha":1}', Color)
    with pytest.raises(DecodeError):
        decode(b'{"red":true,"green":0,"blue":0,"alpha":1}', Color)


def test_semantic_tokens():
    tokens = decode(b'{"resultId":"1","data":[0,5,3,0,0]}', SemanticTokens)
    assert tokens.data == [0, 5, 3, 0, 0]

    delta = decode(
        b'{"edits":[{"start":5,"deleteCount":1,"data":[2]}]}', SemanticTokensDelta
    )
    assert delta.edits[0].delete_count == 1
    assert encode_str(delta) == '{"edits":[{"start":5,"deleteCount":1,"data":[2]}]}'
