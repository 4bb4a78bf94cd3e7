from typing import Any, Dict, Optional, Union

from pydantic import (
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    model_serializer,
)

from lsproto.utils import OpenIntEnum

from .lsp_data_model import LspModel, Nullable

JSONRPC_VERSION = "2.0"

RequestId = Union[StrictInt, StrictStr]


class Message(LspModel):
    jsonrpc: StrictStr = JSONRPC_VERSION


class RequestMessage(Message):
    id: RequestId = 0
    """
    The request id.
    """
    method: StrictStr = ""
    """
    The method to be invoked.
    """
    params: Optional[Any] = None
    """
    The method's params.
    """


class ResponseError(LspModel):
    code: StrictInt = 0
    """
    A number indicating the error type that occurred.
    """
    message: StrictStr = ""
    """
    A string providing a short description of the error.
    """
    data: Optional[Any] = None
    """
    A primitive or structured value that contains additional
    information about the error. Can be omitted.
    """


class ResponseMessage(Message):
    id: Nullable[RequestId] = None
    """
    The request id.
    """
    result: Optional[Any] = None
    """
    The result of a request. This member is REQUIRED on success.
    This member MUST NOT exist if there was an error invoking the method.
    """
    error: Optional[ResponseError] = None
    """
    The error object in case a request fails.
    """

    @model_serializer(mode="wrap")
    def _flatten_embedded(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        # `id` is always written, `result` is written on success even when null
        data = handler(self)
        flat = {"jsonrpc": data.get("jsonrpc", JSONRPC_VERSION), "id": data.get("id")}
        if self.error is None:
            flat["result"] = data.get("result")
        else:
            flat["error"] = data["error"]
        return flat


class NotificationMessage(Message):
    method: StrictStr = ""
    """
    The method to be invoked.
    """
    params: Optional[Any] = None
    """
    The notification's params.
    """


class CancelParams(LspModel):
    id: RequestId = 0
    """
    The request id to cancel.
    """


class ErrorCodes(OpenIntEnum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    SERVER_NOT_INITIALIZED = -32002
    UNKNOWN_ERROR_CODE = -32001
    REQUEST_FAILED = -32803
    SERVER_CANCELLED = -32802
    CONTENT_MODIFIED = -32801
    REQUEST_CANCELLED = -32800
    # jsonrpcReservedErrorRangeStart = -32099
    # jsonrpcReservedErrorRangeEnd = -32000
    # lspReservedErrorRangeStart = -32899
    # lspReservedErrorRangeEnd = -32800
