"""
cli.py

PURPOSE: Command-line interface for DungeonMini.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- play: Play a game interactively (reads commands from stdin)
- scores: Show the high-score table
- validate: Validate a world file
- config: Show the current configuration

play is the only place that ends the process: the engine reports exit
and death as terminal TurnResults and the loop turns them into exit codes.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from dungeon_mini import __version__
from dungeon_mini.config import Settings, get_settings
from dungeon_mini.content import load_world
from dungeon_mini.engine.base import ExitCode
from dungeon_mini.engine.engine import GameEngine, create_engine
from dungeon_mini.models.world import World
from dungeon_mini.observability import init_telemetry, shutdown_telemetry
from dungeon_mini.storage import PersistenceError, Scoreboard
from dungeon_mini.ui import plain

app = typer.Typer(
    name="dungeon-mini",
    help="A small console text adventure.",
    add_completion=False,
)

console = Console()

BANNER = "DungeonMini. Type 'help' for commands."


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"dungeon-mini version {__version__}")
        raise typer.Exit()


def _load_world_or_exit(world_file: Path) -> World:
    try:
        return load_world(world_file)
    except UnicodeDecodeError as e:
        plain.print_error(f"World file is not valid UTF-8: {e.reason} at byte {e.start}")
        raise typer.Exit(1) from None
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON at line {e.lineno}: {e.msg}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error("Invalid world file:")
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            plain.print_error(f"  {loc}: {error['msg']}")
        raise typer.Exit(1) from None


def run_session(engine: GameEngine, settings: Settings) -> ExitCode:
    """
    Read commands until end of input or a terminal turn.

    Returns:
        The exit code the process should end with
    """
    while True:
        try:
            user_input = plain.print_prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            plain.print_message("Goodbye!")
            return ExitCode.OK

        if not user_input.strip():
            continue

        result = engine.process_input(user_input)

        if result.error:
            plain.print_error(result.message)
        else:
            plain.print_message(result.message)

        if settings.debug:
            plain.print_debug(
                {
                    "room": engine.state.current_room,
                    "hp": engine.state.player.hp,
                    "inventory": [item.name for item in engine.state.player.inventory],
                    "score": engine.state.score,
                }
            )

        if result.terminal:
            assert result.exit_code is not None
            _record_final_score(engine, settings)
            died = result.exit_code is ExitCode.DEATH
            plain.print_game_over(died, f"Final score: {engine.state.score}")
            return result.exit_code


def _record_final_score(engine: GameEngine, settings: Settings) -> None:
    try:
        Scoreboard(settings.scores_path()).record_score(
            engine.state.player.name, engine.state.score
        )
    except PersistenceError as e:
        plain.print_error(f"Could not record score: {e}")


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """DungeonMini - explore, fight, survive."""
    pass


@app.command()
def play(
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            help="Directory for the save file and scoreboard",
        ),
    ] = None,
    world_file: Annotated[
        Path | None,
        typer.Option(
            "--world",
            "-w",
            help="Play a world loaded from a JSON file instead of the sample world",
            exists=True,
            readable=True,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show debug information after each turn",
        ),
    ] = False,
) -> None:
    """Play the game, reading one command per line."""
    settings = get_settings(data_dir=data_dir, debug=debug or None)
    plain.configure_logging("DEBUG" if settings.debug else settings.log_level)
    init_telemetry(settings.otel)

    world = _load_world_or_exit(world_file) if world_file else None
    engine = create_engine(settings, world)

    plain.print_title(engine.state.world.title)
    plain.print_message(BANNER)
    plain.print_room(engine.describe_current_room())

    try:
        exit_code = run_session(engine, settings)
    finally:
        plain.flush()
        shutdown_telemetry()

    if exit_code is not ExitCode.OK:
        raise typer.Exit(int(exit_code))


@app.command()
def scores(
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            help="Directory for the save file and scoreboard",
        ),
    ] = None,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Number of scores to show",
            min=1,
            max=100,
        ),
    ] = 10,
) -> None:
    """Show the high-score table."""
    settings = get_settings(data_dir=data_dir)
    try:
        entries = Scoreboard(settings.scores_path()).list_scores(limit=limit)
    except PersistenceError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None
    plain.print_scores(entries)


@app.command()
def validate(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the world JSON file",
            exists=True,
            readable=True,
        ),
    ],
) -> None:
    """Validate a world JSON file."""
    world = _load_world_or_exit(world_file)

    rooms = world.rooms.values()
    plain.print_success(f"Valid world: {world.title}")
    console.print(f"  Rooms: {len(world.rooms)}")
    console.print(f"  Items: {sum(len(room.items) for room in rooms)}")
    console.print(f"  Monsters: {sum(1 for room in rooms if room.monster is not None)}")
    console.print(f"  Start room: {world.start_room}")


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Data directory: {settings.data_dir}")
    console.print(f"  Save file: {settings.save_path()}")
    console.print(f"  Scores file: {settings.scores_path()}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print()
    console.print("[bold]New Player:[/bold]")
    console.print(f"  Name: {settings.player_name}")
    console.print(f"  HP: {settings.player_hp}")
    console.print(f"  Attack: {settings.player_attack}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")


if __name__ == "__main__":
    app()
