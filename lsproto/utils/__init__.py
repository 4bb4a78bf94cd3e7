from .enums import OpenIntEnum, StrEnum
