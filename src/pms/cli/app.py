"""CLI main module for pms."""

from __future__ import annotations

import typer

from pms.app import Application
from pms.cli.completion import CommandCompleter
from pms.cli.render import Renderer
from pms.cli.shell import run_shell
from pms.commands import Interpreter
from pms.config import Settings, load_settings
from pms.errors import ConfigurationError
from pms.logging_utils import LogProfile, configure_logging

app = typer.Typer(
    name="pms",
    help="Practical music search.",
    add_completion=False,
    rich_markup_mode="rich",
)


def build_application(settings: Settings) -> Application:
    return Application(settings)


def _startup(profile: LogProfile) -> Application:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2) from exc
    configure_logging(profile=profile, level=settings.log_level)
    return build_application(settings)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        shell()


@app.command()
def shell() -> None:
    """Start the interactive command shell."""

    application = _startup("shell")
    interpreter = Interpreter(application)
    renderer = Renderer(completer=CommandCompleter(interpreter))
    try:
        run_shell(application, interpreter, renderer)
    finally:
        application.close()


@app.command()
def run(
    lines: list[str] = typer.Argument(..., help="Command lines, e.g. 'list goto my-tracks; cursor end'"),
) -> None:
    """Run command lines once and exit."""

    application = _startup("default")
    interpreter = Interpreter(application)

    failed = False
    try:
        for line in lines:
            for result in interpreter.run(line):
                if result.ok:
                    typer.echo(f"{result.verb}: ok")
                else:
                    typer.echo(f"{result.verb}: {result.error}", err=True)
                    failed = True
            if failed:
                break
    finally:
        application.close()

    active = application.active_list
    if active is not None:
        position = f"{active.cursor + 1}/{len(active)}" if len(active) else "empty"
        typer.echo(f"active list: {active.name} ({position})")
    if failed:
        raise typer.Exit(1)
