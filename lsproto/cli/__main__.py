import logging
import sys

import rich_click as click
from click.core import Context
from rich.logging import RichHandler

from lsproto.core.logging import DEBUG_ENV_VAR

from .console import console
from .decode import run_decode, run_method
from .structures import run_types


def excepthook(type, value, traceback):
    from rich.console import Console
    from rich.traceback import Traceback

    traceback_console = Console(stderr=True)
    traceback_console.print(
        Traceback.from_exception(
            type,
            value,
            traceback,
            suppress=[click],
        )
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    default=False,
    envvar=DEBUG_ENV_VAR,
    help="Set logging level to debug.",
)
@click.version_option(message="%(version)s", package_name="lsproto")
@click.pass_context
def main(ctx: Context, debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, console=console, markup=False)],
        force=True,  # pyright: ignore reportGeneralTypeIssues
    )
    sys.excepthook = excepthook

    if debug:
        from lsproto.core.logging import set_debug

        set_debug(True)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


main.add_command(run_decode)
main.add_command(run_method)
main.add_command(run_types)


if __name__ == "__main__":
    main()
