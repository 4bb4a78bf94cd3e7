from .codec import decode, decode_object, encode, encode_str
from .exceptions import (
    DecodeError,
    MalformedUriError,
    ProtocolError,
    UnknownMethodError,
)
from .lsp_data_model import Embedded, LspModel, Nullable, variant
from .methods import PARAMS_TYPES, RequestMethodEnum, decode_params, params_type
