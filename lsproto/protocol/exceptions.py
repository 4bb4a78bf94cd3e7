from typing import Any, List, Optional


class ProtocolError(Exception):
    pass


class DecodeError(ProtocolError, ValueError):
    """
    Wire content could not be decoded into the requested structure.
    """

    __target: Any
    __errors: List[Any]

    def __init__(
        self, message: str, target: Any = None, errors: Optional[List[Any]] = None
    ):
        super().__init__(message)
        self.__target = target
        self.__errors = errors or []

    @property
    def target(self) -> Any:
        """
        Type the content was decoded into.
        """
        return self.__target

    @property
    def errors(self) -> List[Any]:
        """
        Per-location error details as reported by pydantic.
        """
        return self.__errors


class MalformedUriError(ProtocolError, ValueError):
    pass


class UnknownMethodError(ProtocolError, KeyError):
    def __str__(self) -> str:
        return Exception.__str__(self)
