from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import typer

from errchain import __version__
from errchain.core.chain import dump
from errchain.core.config import active_config, configure, load_config
from errchain.core.errors import ExitCode
from errchain.core.result import Err, Ok
from errchain.demo import check_scenario, configure_device
from errchain.output.console import ConsoleProtocol, RichConsole, Style


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def build_console() -> ConsoleProtocol:
    return RichConsole()


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.OK))


@app.command()
def demo(
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML file with a [snapshot] table.",
    ),
    snapshot: bool = typer.Option(
        True,
        "--snapshot/--no-snapshot",
        help="Capture stack snapshots when errors are built.",
    ),
) -> None:
    """Build the example chain, check its shape and print it."""
    console = build_console()

    settings = active_config()
    if config is not None:
        match load_config(config):
            case Err(error):
                console.error(error.message)
                raise typer.Exit(code=int(ExitCode.USER_ERROR))
            case Ok(loaded):
                settings = loaded
    if not snapshot:
        settings = replace(settings, snapshot=replace(settings.snapshot, enabled=False))

    previous = configure(settings)
    try:
        err = configure_device().expect_err("configure_device unexpectedly succeeded")
    finally:
        configure(previous)

    console.header("The error's debug representation")
    console.print(dump(err))

    console.header("Just the error")
    console.print(str(err))

    console.header("The chain")
    console.chain(err)

    console.header("Just this error's stack snapshot")
    captured = err.stack_snapshot()
    if captured is None:
        console.info("stack snapshot capture is disabled")
    else:
        console.print(captured.format().rstrip("\n"), Style.DIM)

    failures = check_scenario(err)
    if failures:
        for failure in failures:
            console.error(failure)
        raise typer.Exit(code=int(ExitCode.CHECK_FAILED))


def main() -> None:
    app()
