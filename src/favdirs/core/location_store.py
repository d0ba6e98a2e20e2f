"""Durable storage for the key -> path bindings and the last selection."""

import os
from os import path

from textual import log


def parse_locations(text: str) -> dict[str, str]:
    """
    Parse the bindings file format.

    Each line is `key=path`: the key is the first character, the separator the
    second, and the rest of the line is the path. The key may itself be `=`.
    Blank lines are ignored. Lines whose second character is not `=` are skipped.

    Args:
        text (str): The file contents.

    Returns:
        dict[str, str]: The bindings.
    """
    locations = {}
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line:
            continue
        if len(line) < 2 or line[1] != "=":
            log.warning(f"Skipping malformed location line: {line!r}")
            continue
        locations[line[0]] = line[2:]
    return locations


def format_locations(locations: dict[str, str]) -> str:
    """Serialize bindings, one `key=path` line each, sorted by key."""
    return "".join(f"{key}={locations[key]}\n" for key in sorted(locations))


def _atomic_write(target: str, content: str) -> None:
    temp_path = target + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, target)
    except OSError:
        if path.isfile(temp_path):
            os.remove(temp_path)
        raise


class LocationStore:
    """Reads and writes the two flat text artifacts.

    Attributes:
        locations_file (str): Path of the bindings artifact.
        select_file (str): Path of the selection artifact.
    """

    def __init__(self, locations_file: str, select_file: str) -> None:
        self.locations_file = locations_file
        self.select_file = select_file

    def load(self) -> dict[str, str]:
        """Load the bindings. A missing or unreadable file gives no bindings."""
        try:
            with open(self.locations_file, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as error:
            log.warning(f"Could not read {self.locations_file}: {error}")
            return {}
        return parse_locations(text)

    def save(self, locations: dict[str, str]) -> None:
        """Overwrite the bindings file. Raises OSError when the write fails."""
        _atomic_write(self.locations_file, format_locations(locations))

    def save_selected(self, selected: str) -> None:
        """Overwrite the selection file with the raw path."""
        _atomic_write(self.select_file, selected)
