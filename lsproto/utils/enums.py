from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema


class StrEnum(str, Enum):
    """
    Closed set of string literals. Values outside the set are rejected by both
    the enum constructor and the wire decoder.
    """

    def __str__(self) -> str:
        return str.__str__(self)


def _camel_case(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


class OpenIntEnum(IntEnum):
    """
    Integer enumeration that tolerates values it does not know.

    `MyEnum(42)` for an undefined 42 returns a pseudo-member that compares and
    hashes as the plain integer, encodes back to 42 and renders as `"42"`.
    Pseudo-members are created on demand and never registered on the class.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_before_validator_function(
            cls._check_int, handler(source_type)
        )

    @classmethod
    def _check_int(cls, v: Any) -> Any:
        # "1", true and 1.0 are not integers on the wire
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(
                f"{cls.__name__} must be an integer, got {type(v).__name__}"
            )
        return v

    @classmethod
    def _missing_(cls, value: Any) -> Optional["OpenIntEnum"]:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        pseudo_member = int.__new__(cls, value)
        pseudo_member._name_ = None  # pyright: ignore reportGeneralTypeIssues
        pseudo_member._value_ = value
        return pseudo_member

    @property
    def known(self) -> bool:
        return self._name_ is not None

    def __str__(self) -> str:
        if self._name_ is None:
            return str(self._value_)
        return _camel_case(self._name_)

    def __repr__(self) -> str:
        if self._name_ is None:
            return f"<{self.__class__.__name__}: {self._value_}>"
        return super().__repr__()
