"""clienthooks command line interface."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

import typer

from clienthooks.config import get_settings
from clienthooks.hooks import ClientHooks
from clienthooks.host import StaticHost, StaticWorld
from clienthooks.logging_utils import configure_logging
from clienthooks.session import ClientSession
from clienthooks.types import BlockPos, MonitorTarget, TargetedObject, TurtleTarget, TurtleUpgrade

app = typer.Typer(name="clienthooks", help="Drive the client hook layer from a shell", add_completion=False)
debug_app = typer.Typer(help="Print the debug overlay lines for a targeted block")
app.add_typer(debug_app, name="debug")

_ORIGIN = BlockPos(0, 0, 0)


@app.callback()
def _main(log_level: Optional[str] = typer.Option(None, help="Override CLIENTHOOKS_LOG_LEVEL")) -> None:
    configure_logging(profile="cli", level=log_level)


@app.command()
def chat(
    text: str = typer.Argument(..., help="Chat message as the player would send it"),
    storage_root: Optional[Path] = typer.Option(None, help="Storage root of the local world"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve the folder without opening it"),
) -> None:
    """Run a chat message through the command interceptor."""

    settings = get_settings()
    root = storage_root or settings.storage_root
    hooks = ClientHooks(StaticHost(), settings=settings, session=ClientSession(storage_root=root))

    if dry_run:
        folder = hooks.interceptor.resolve(text)
        if folder is None:
            typer.echo("not consumed")
            return
        typer.echo(f"consumed: would open {folder}")
        return

    typer.echo("consumed" if hooks.on_chat_message(text) else "not consumed")


@app.command("hooks")
def hooks_report(
    plugin: list[str] = typer.Option([], "--plugin", help="Renderer provider as name=module:attribute"),
) -> None:
    """Print which renderer providers implement each hook, in call order."""

    hooks = ClientHooks(StaticHost(), settings=get_settings())
    for entry in plugin:
        name, provider = _load_plugin(entry)
        hooks.register_renderer(provider, name)

    report = hooks.hook_report()
    if not report:
        typer.echo("No renderer providers registered.")
        return
    for hook_name, providers in report.items():
        typer.echo(f"{hook_name}: {', '.join(providers)}")


@debug_app.command()
def monitor(
    x: int = typer.Option(0, help="Column of the targeted monitor block"),
    y: int = typer.Option(0, help="Row of the targeted monitor block"),
    width: int = typer.Option(1, help="Monitor width in blocks"),
    height: int = typer.Option(1, help="Monitor height in blocks"),
) -> None:
    """Show the overlay for a targeted monitor."""

    _print_debug(MonitorTarget(x_index=x, y_index=y, width=width, height=height))


@debug_app.command()
def turtle(
    computer_id: int = typer.Option(0, "--id", help="Turtle computer id"),
    left: Optional[str] = typer.Option(None, help="Left upgrade id"),
    right: Optional[str] = typer.Option(None, help="Right upgrade id"),
) -> None:
    """Show the overlay for a targeted turtle."""

    _print_debug(
        TurtleTarget(
            computer_id=computer_id,
            left=TurtleUpgrade(left) if left else None,
            right=TurtleUpgrade(right) if right else None,
        )
    )


def _load_plugin(entry: str) -> tuple[str, object]:
    name, sep, target = entry.partition("=")
    module_name, colon, attribute = target.partition(":")
    if not sep or not colon or not name or not module_name or not attribute:
        raise typer.BadParameter(f"expected name=module:attribute, got {entry!r}", param_hint="--plugin")
    module = importlib.import_module(module_name)
    return name, getattr(module, attribute)


def _print_debug(target: TargetedObject) -> None:
    world = StaticWorld()
    world.target(_ORIGIN, target)
    hooks = ClientHooks(StaticHost(debug_overlay=True, world=world), settings=get_settings())
    hooks.add_debug_info(typer.echo)
