"""Key handling rules for the three interaction modes.

Each handler is pure: it gets the pressed key, the current bindings and the
starting directory, and describes what should happen through a `ScreenUpdate`.
"""

from dataclasses import dataclass
from enum import Enum


class ScreenKind(Enum):
    SELECT = "select"
    ADD = "add"
    DELETE = "delete"


INITIAL_HELP = {
    ScreenKind.SELECT: "Select a directory to jump to.",
    ScreenKind.ADD: "Add current directory by pressing a key.",
    ScreenKind.DELETE: "Delete a directory binding.",
}


@dataclass(frozen=True)
class SaveLocations:
    """Persistence effect: write these bindings to the store."""

    locations: dict[str, str]


@dataclass(frozen=True)
class ScreenUpdate:
    """Outcome of one key press on a screen.

    Attributes:
        locations (dict[str, str]): The bindings after the key press.
        help_text (str): The help line to show.
        selected (str | None): The chosen path, when the key resolved to one.
        effect (SaveLocations | None): Persistence work to run before the next key.
    """

    locations: dict[str, str]
    help_text: str
    selected: str | None = None
    effect: SaveLocations | None = None


def is_bindable(key: str) -> bool:
    """Whether a key name is a single printable character."""
    return len(key) == 1 and key.isprintable()


def handle_select(key: str, locations: dict[str, str]) -> ScreenUpdate:
    if key not in locations:
        return ScreenUpdate(locations, f"No directory bound to {key}.")
    return ScreenUpdate(locations, INITIAL_HELP[ScreenKind.SELECT], selected=locations[key])


def handle_add(key: str, locations: dict[str, str], starting_directory: str) -> ScreenUpdate:
    if key in locations:
        return ScreenUpdate(locations, f"Key {key} is already bound to a directory.")
    if not is_bindable(key):
        return ScreenUpdate(locations, f"Cannot bind {key}, use a single character.")
    updated = {**locations, key: starting_directory}
    return ScreenUpdate(updated, f"Directory bound to {key}.", effect=SaveLocations(updated))


def handle_delete(key: str, locations: dict[str, str]) -> ScreenUpdate:
    if key not in locations:
        return ScreenUpdate(locations, f"No directory bound to {key}.")
    updated = {k: v for k, v in locations.items() if k != key}
    return ScreenUpdate(updated, f"Deleted directory from {key}.", effect=SaveLocations(updated))


def handle_screen_key(
    screen: ScreenKind, key: str, locations: dict[str, str], starting_directory: str
) -> ScreenUpdate:
    """Dispatch a key press to the handler of the active screen."""
    match screen:
        case ScreenKind.SELECT:
            return handle_select(key, locations)
        case ScreenKind.ADD:
            return handle_add(key, locations, starting_directory)
        case ScreenKind.DELETE:
            return handle_delete(key, locations)
