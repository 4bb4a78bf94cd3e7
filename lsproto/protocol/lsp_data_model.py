from typing import Any, ClassVar, Dict, FrozenSet, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictBool,
    Tag,
    model_serializer,
    model_validator,
)
from typing_extensions import Annotated

T = TypeVar("T")


def _to_camel(s: str) -> str:
    split = s.split("_")
    return split[0].lower() + "".join([w.capitalize() for w in split[1:]])


class _EmbeddedMarker:
    def __repr__(self) -> str:
        return "Embedded"


class _NullableMarker:
    def __repr__(self) -> str:
        return "Nullable"


EMBEDDED = _EmbeddedMarker()
NULLABLE = _NullableMarker()

Embedded = Annotated[T, EMBEDDED]
"""
A building block whose keys are written into the enclosing object instead of
under a key of its own, e.g. `WorkDoneProgressParams` inside `HoverParams`.
"""

Nullable = Annotated[Optional[T], NULLABLE]
"""
A required field whose protocol type admits `null`. Encoded as `null` when unset.
"""


class LspModel(BaseModel):
    """
    Base of every protocol structure.

    Fields use snake_case in Python and lowerCamelCase on the wire. Optional
    fields default to `None` and are left out of the encoded object; required
    fields default to their zero value and are always written. Keys the model
    does not know are ignored on decode.
    """

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    __lsp_embedded__: ClassVar[Dict[str, Type["LspModel"]]] = {}
    __lsp_nullable__: ClassVar[FrozenSet[str]] = frozenset()
    __lsp_wire_keys__: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        embedded: Dict[str, Type[LspModel]] = {}
        nullable = set()
        wire_keys = set()
        for name, field in cls.model_fields.items():
            if any(m is EMBEDDED for m in field.metadata):
                block = field.annotation
                if not (isinstance(block, type) and issubclass(block, LspModel)):
                    raise TypeError(
                        f"{cls.__name__}.{name}: only LspModel subclasses can be embedded"
                    )
                embedded[name] = block
                wire_keys |= block.__lsp_wire_keys__
                continue
            if any(m is NULLABLE for m in field.metadata):
                nullable.add(name)
            wire_keys.add(name)
            if field.alias is not None:
                wire_keys.add(field.alias)

        cls.__lsp_embedded__ = embedded
        cls.__lsp_nullable__ = frozenset(nullable)
        cls.__lsp_wire_keys__ = frozenset(wire_keys)

    @model_validator(mode="before")
    @classmethod
    def _collect_embedded(cls, data: Any) -> Any:
        if not cls.__lsp_embedded__ or not isinstance(data, dict):
            return data

        data = dict(data)
        for name, block in cls.__lsp_embedded__.items():
            alias = cls.model_fields[name].alias
            if name in data or (alias is not None and alias in data):
                continue
            data[name] = {
                key: value
                for key, value in data.items()
                if key in block.__lsp_wire_keys__
            }
        return data

    @model_serializer(mode="wrap")
    def _flatten_embedded(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        cls = type(self)
        if not isinstance(data, dict) or (
            not cls.__lsp_embedded__ and not cls.__lsp_nullable__
        ):
            return data

        flat: Dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias if info.by_alias and field.alias is not None else name
            if name in cls.__lsp_embedded__:
                block = data.get(key)
                if isinstance(block, dict):
                    flat.update(block)
            elif key in data:
                flat[key] = data[key]
            elif name in cls.__lsp_nullable__ and getattr(self, name) is None:
                flat[key] = None
        return flat

    def __getattr__(self, item: str) -> Any:
        # fields of embedded blocks are readable on the enclosing structure
        if not item.startswith("_"):
            values = self.__dict__
            for name in type(self).__lsp_embedded__:
                block = values.get(name)
                if block is not None and item in type(block).__lsp_wire_keys__:
                    return getattr(block, item)
        return super().__getattr__(item)  # pyright: ignore reportGeneralTypeIssues


FLAG = "flag"


def variant(*choices: Type[LspModel], flag: bool = False) -> Any:
    """
    Union of structures (and optionally a boolean flag) resolved by the JSON
    kind of the wire value.

    A JSON boolean selects the flag. An object selects the first choice that
    has a key none of the later choices know about, and falls back to the last
    choice, so choices go from the most specific to the most general.
    Constructed values keep the type they were created with.
    """
    specific = []
    for i, choice in enumerate(choices[:-1]):
        later = frozenset().union(*(c.__lsp_wire_keys__ for c in choices[i + 1 :]))
        specific.append((choice, choice.__lsp_wire_keys__ - later))

    def discriminate(value: Any) -> Optional[str]:
        if isinstance(value, bool):
            return FLAG if flag else None
        if isinstance(value, dict):
            for choice, keys in specific:
                if not keys.isdisjoint(value.keys()):
                    return choice.__name__
            return choices[-1].__name__
        for choice in choices:
            if isinstance(value, choice):
                return choice.__name__
        return None

    tagged = [Annotated[c, Tag(c.__name__)] for c in choices]
    if flag:
        tagged.insert(0, Annotated[StrictBool, Tag(FLAG)])
    return Annotated[Union[tuple(tagged)], Discriminator(discriminate)]
