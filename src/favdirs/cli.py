"""favdirs command-line interface."""

import argparse
import os
import sys

from . import __version__
from .core import Keymap, LocationStore, Session
from .functions.config import ConfigError, config_setup, load_config, resolve_store_paths


def validate_key(parser: argparse.ArgumentParser, key: str) -> str:
    if len(key) != 1 or not key.isprintable():
        parser.error("Keybind must be a single character.")
    return key


def fail(message: str, error: Exception) -> None:
    print(message, error, file=sys.stderr)
    sys.exit(1)


def add_location(store: LocationStore, key: str, location: str) -> None:
    """Bind `location` to `key` and make it the selected path."""
    locations = store.load()
    locations[key] = location
    store.save(locations)
    store.save_selected(location)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="favdirs",
        description="Jump to favourite directories with single-key shortcuts.",
    )
    p.add_argument(
        "key",
        nargs="?",
        help="Bind the current directory to this key instead of opening the picker",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main() -> None:
    """CLI entry point. Opens the picker unless a key is given."""
    parser = build_parser()
    args = parser.parse_args()
    if args.key is not None:
        validate_key(parser, args.key)

    try:
        config = load_config(config_setup())
        locations_file, select_file = resolve_store_paths(config)
    except ConfigError as error:
        fail("Error loading configuration:", error)
    try:
        current = os.getcwd()
    except OSError as error:
        fail("Error reading current directory:", error)

    store = LocationStore(locations_file, select_file)

    if args.key is not None:
        try:
            add_location(store, args.key, current)
        except OSError as error:
            fail("Error saving locations:", error)
        print("Added location successfully.")
        return

    from .app import Application

    session = Session(
        locations=store.load(),
        starting_directory=current,
        keymap=Keymap.from_config(config["keybinds"]),
    )
    app = Application(store, session, config)
    result = app.run()
    if app.return_code:
        sys.exit(app.return_code)
    if result is not None and result != current:
        print(f"Moving to {result}...")


if __name__ == "__main__":
    main()
