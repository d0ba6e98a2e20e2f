from .location_store import LocationStore, format_locations, parse_locations
from .screens import SaveLocations, ScreenKind
from .session import Keymap, Session

__all__ = [
    "LocationStore",
    "format_locations",
    "parse_locations",
    "SaveLocations",
    "ScreenKind",
    "Keymap",
    "Session",
]
