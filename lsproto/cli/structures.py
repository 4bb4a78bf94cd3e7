import functools
import importlib
import inspect
import pkgutil
from typing import Dict, List, Optional, Type

import rich_click as click
from click.core import Context, Parameter
from rich.table import Table

from lsproto.protocol import LspModel

from .console import console

PROTOCOL_MODULES = (
    "lsproto.protocol.common_structures",
    "lsproto.protocol.general",
    "lsproto.protocol.window",
    "lsproto.protocol.workspace",
    "lsproto.protocol.document_sync",
    "lsproto.protocol.client_capabilities",
    "lsproto.protocol.server_capabilities",
    "lsproto.protocol.protocol_structures",
)


@functools.lru_cache(maxsize=None)
def protocol_structures() -> Dict[str, Type[LspModel]]:
    """
    Every protocol structure defined by `lsproto.protocol`, keyed by class name.
    """
    from lsproto.protocol import features

    module_names = list(PROTOCOL_MODULES)
    module_names.extend(
        f"{features.__name__}.{info.name}"
        for info in pkgutil.iter_modules(features.__path__)
    )

    structures: Dict[str, Type[LspModel]] = {}
    for module_name in module_names:
        module = importlib.import_module(module_name)
        for name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, LspModel)
                and obj.__module__ == module.__name__
                and not name.startswith("_")
            ):
                structures[name] = obj
    return dict(sorted(structures.items()))


def wire_keys(structure: Type[LspModel]) -> List[str]:
    keys = []
    for name, field in structure.model_fields.items():
        block = structure.__lsp_embedded__.get(name)
        if block is not None:
            keys.extend(wire_keys(block))
        else:
            keys.append(field.alias or name)
    return keys


class StructureName(click.ParamType):
    name = "structure"

    def convert(self, value, param, ctx) -> Type[LspModel]:
        if isinstance(value, type) and issubclass(value, LspModel):
            return value
        try:
            return protocol_structures()[value]
        except KeyError:
            self.fail(f"Unknown protocol structure {value!r}", param, ctx)

    def shell_complete(self, ctx: Context, param: Parameter, incomplete: str):
        from click.shell_completion import CompletionItem

        return [
            CompletionItem(name)
            for name in protocol_structures()
            if name.startswith(incomplete)
        ]


@click.command(name="types")
@click.option(
    "--module",
    "-m",
    type=str,
    default=None,
    help="Only list structures whose module name contains this string.",
)
def run_types(module: Optional[str]) -> None:
    """
    List protocol structures and their wire keys.
    """
    table = Table(title="Protocol structures")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Module")
    table.add_column("Wire keys")

    for name, structure in protocol_structures().items():
        module_name = structure.__module__.replace("lsproto.protocol.", "")
        if module is not None and module not in module_name:
            continue
        table.add_row(name, module_name, ", ".join(wire_keys(structure)))

    console.print(table)
