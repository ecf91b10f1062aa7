"""Roguelike Level CLI entry point.

Provides subcommands for printing a generated level and for running the
JSON API server. Accepts configuration via flags and environment variables,
with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from roguelike_level import __version__
from roguelike_level.level import LevelConfigError, LevelGenerationError, LevelRandom, Tile, generate_level
from roguelike_level.level.render import to_ascii
from roguelike_level.logging_utils import log

TILE_COLORS = {
    Tile.WALL: Fore.WHITE + Style.DIM,
    Tile.FLOOR: Fore.WHITE,
    Tile.DOOR: Fore.YELLOW,
    Tile.SPECIAL_DOOR: Fore.MAGENTA + Style.BRIGHT,
    Tile.ENTER: Fore.GREEN + Style.BRIGHT,
    Tile.EXIT: Fore.RED + Style.BRIGHT,
}


def _color_enabled() -> bool:
    try:
        return sys.stdout.isatty() and os.getenv("NO_COLOR") is None
    except (AttributeError, ValueError):  # pragma: no cover - detached stdout
        return False


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Roguelike Level Generator

    Generate a dungeon level of slid-together rooms and print it, or run the
    JSON API server. Configuration can be provided via CLI flags or
    environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                  Bind address for the web server (default: 0.0.0.0)
          PORT                  Port for the web server (default: 5000)
          ROGUELIKE_LOG_LEVEL   debug | info | warn | error (default: info)
          ROGUELIKE_LOG_JSON    Emit JSON log lines when set to 1
          LEVEL_ENABLE_METRICS  Collect per-phase generation metrics (default: 1)

        Examples:
          # Print a level for a fixed seed
          python run.py generate --seed 42

          # Bigger level with a special room, as JSON
          python run.py generate --width 41 --height 31 --ideal 25 --special --json

          # Run the API server on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="roguelike-level",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Roguelike Level {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one level and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one level and print it as ASCII art or JSON",
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible level")
    gen_parser.add_argument("--width", type=int, default=None, help="Grid width in tiles (default: 21)")
    gen_parser.add_argument("--height", type=int, default=None, help="Grid height in tiles (default: 21)")
    gen_parser.add_argument("--ideal", type=int, default=None, help="Target room count (default: 10)")
    gen_parser.add_argument("--retry", type=int, default=None, help="Shared failed-attempt budget (default: 10)")
    gen_parser.add_argument("--min-room", type=int, default=None, help="Minimum room width and height")
    gen_parser.add_argument("--max-room", type=int, default=None, help="Maximum room width and height")
    gen_parser.add_argument("--special", action="store_true", help="Try to designate a special room")
    gen_parser.add_argument("--json", action="store_true", help="Print the full level as JSON")
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask development server for the level API",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate; it goes after the
    # top-level options so generate-only flags still parse.
    if not any(a in subparsers.choices for a in argv):
        argv = list(argv)
        i = 0
        while i < len(argv) and argv[i].startswith("--env-file"):
            i += 1 if "=" in argv[i] else 2
        argv.insert(min(i, len(argv)), "generate")

    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> dict:
    room = {"ideal": args.ideal}
    if args.min_room is not None:
        room["min_width"] = room["min_height"] = args.min_room
    if args.max_room is not None:
        room["max_width"] = room["max_height"] = args.max_room
    return {
        "width": args.width,
        "height": args.height,
        "retry": args.retry,
        "special": args.special,
        "room": room,
    }


def run_generate(args: argparse.Namespace) -> int:
    rng = LevelRandom(args.seed)
    try:
        level = generate_level(_config_from_args(args), rng=rng)
    except LevelConfigError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except LevelGenerationError as exc:
        print(f"[ERROR] {exc} (seed={rng.seed})", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(level.to_dict()))
        return 0

    if _color_enabled():
        _color_init()
        print(to_ascii(level, palette=TILE_COLORS, reset=Style.RESET_ALL))
    else:
        print(to_ascii(level))
    special = f" special={level.special.room_id}" if level.special else ""
    print(
        f"seed={level.seed} rooms={level.room_count} doors={level.door_count} "
        f"enter={level.enter.room_id} exit={level.exit.room_id}{special} deadends={list(level.deadends)}"
    )
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    # Import server entrypoint only after environment is ready
    from roguelike_level.server import start_server

    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def main_entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main_entry())
