import sys
from typing import BinaryIO, Type

import rich_click as click

from lsproto.core import get_logger
from lsproto.protocol import (
    DecodeError,
    LspModel,
    UnknownMethodError,
    decode,
    encode_str,
    params_type,
)

from .console import console
from .structures import StructureName

logger = get_logger(__name__)


def _decode_and_print(data: bytes, target: Type[LspModel]) -> None:
    try:
        value = decode(data, target)
    except DecodeError as e:
        console.print(str(e), style="red", markup=False, highlight=False)
        sys.exit(1)
    logger.debug(f"Decoded {value!r}")
    click.echo(encode_str(value))


@click.command(name="decode")
@click.argument("structure", type=StructureName())
@click.argument("file", type=click.File("rb"), default="-")
def run_decode(structure: Type[LspModel], file: BinaryIO) -> None:
    """
    Decode JSON from FILE (or standard input) as STRUCTURE and print it re-encoded.
    """
    _decode_and_print(file.read(), structure)


@click.command(name="method")
@click.argument("method", type=str)
@click.argument("file", type=click.File("rb"), default="-")
def run_method(method: str, file: BinaryIO) -> None:
    """
    Decode the params of METHOD from FILE (or standard input) and print them
    re-encoded.
    """
    try:
        target = params_type(method)
    except UnknownMethodError as e:
        console.print(str(e), style="red", markup=False, highlight=False)
        sys.exit(1)
    _decode_and_print(file.read(), target)
