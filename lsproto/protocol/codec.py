"""
JSON wire codec for protocol structures.

`encode` produces compact UTF-8 JSON: keys in declaration order with embedded
blocks flattened in place, camelCase aliases, optional fields left out while
unset. `decode` is the inverse and reports every data problem as a
`DecodeError`.
"""
import functools
from typing import Any, Type, TypeVar, Union, overload

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json

from lsproto.core import get_logger

from .exceptions import DecodeError

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

ENCODING = "utf-8"


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def encode(value: Any) -> bytes:
    """
    Encode a protocol value (structure, list of structures, enum member or
    plain JSON value) into JSON bytes.
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, exclude_none=True).encode(
            ENCODING
        )
    return to_json(value, by_alias=True, exclude_none=True)


def encode_str(value: Any) -> str:
    return encode(value).decode(ENCODING)


def _decode_error(error: ValidationError, target: Any) -> DecodeError:
    name = _type_name(target)
    logger.debug(f"Failed to decode {name}: {error}")
    return DecodeError(
        f"Invalid {name}: {error.error_count()} error(s)\n{error}",
        target=target,
        errors=error.errors(include_url=False),
    )


@overload
def decode(data: Union[bytes, str], target: Type[M]) -> M:
    ...


@overload
def decode(data: Union[bytes, str], target: Any) -> Any:
    ...


def decode(data: Union[bytes, str], target: Any) -> Any:
    """
    Decode JSON `data` into `target`, a structure class or a typing form such
    as `List[WorkspaceFolder]`.

    Raises:
        DecodeError: `data` is not JSON, or holds a value of the wrong kind for
            a key `target` knows about.
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate_json(data)
        return _adapter(target).validate_json(data)
    except ValidationError as e:
        raise _decode_error(e, target) from None


def decode_object(obj: Any, target: Any) -> Any:
    """
    Same as `decode` for an already parsed JSON value (dicts, lists, scalars).
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(obj)
        return _adapter(target).validate_python(obj)
    except ValidationError as e:
        raise _decode_error(e, target) from None
