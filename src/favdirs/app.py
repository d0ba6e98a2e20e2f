from os import path

from rich.text import Text
from textual import events, log
from textual.app import App, ComposeResult
from textual.containers import VerticalGroup
from textual.widgets import Static

from .core import LocationStore, SaveLocations, ScreenKind, Session
from .variables.constants import ScreenColors, ScreenTitles


def dir_name(location: str) -> str:
    return path.basename(location.rstrip("/")) or location


def truncate_path(location: str, max_width: int) -> str:
    """
    Shorten a path from the left so that it fits next to its folder name.

    Args:
        location (str): The path to shorten.
        max_width (int): The width of a whole row.

    Returns:
        str: The path, or `...` followed by its tail.
    """
    room = max(max_width - len(dir_name(location)) - 5, 0)
    if len(location) <= room:
        return location
    if room <= 3:
        return "..."
    return "..." + location[-(room - 3):]


def location_rows(locations: dict[str, str], color: str, max_width: int) -> Text:
    """Render the bindings as `[key] name  path` rows, sorted by key."""
    rows = Text()
    for key in sorted(locations):
        location = locations[key]
        rows.append("[")
        rows.append(key, style=f"bold {color}")
        rows.append("] ")
        rows.append(f"{dir_name(location):<20}", style=color)
        rows.append(" ")
        rows.append(truncate_path(location, max_width), style="dim")
        rows.append("\n")
    if not locations:
        rows.append("No directories bound yet.", style="dim italic")
    rows.rstrip()
    return rows


class Application(App, inherit_bindings=False):
    """Event loop around a `Session`.

    Every key is handed to the session; the app only runs the persistence
    effects the session asks for and redraws.
    """

    CSS_PATH = "style.tcss"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, store: LocationStore, session: Session, config: dict, **kwargs) -> None:
        super().__init__(**kwargs)
        self.store = store
        self.session = session
        self.config = config

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="root"):
            yield Static(id="help")
            yield Static(id="locations")
            yield Static(id="hotkeys")

    def on_mount(self) -> None:
        self.theme = self.config["interface"]["theme"]
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        if self.session.terminal:
            # exit already requested
            return
        key = event.character if event.is_printable and event.character else event.key
        session, effect = self.session.handle_key(key)
        if effect is not None:
            session = self.run_effect(session, effect)
        self.session = session
        if session.terminal:
            self.finish()
        else:
            self.refresh_view()

    def run_effect(self, session: Session, effect: SaveLocations) -> Session:
        try:
            self.store.save(effect.locations)
        except OSError as error:
            log.error(f"Saving locations failed: {error}")
            self.notify(str(error), title="Could not save locations", severity="error")
            return session.save_failed(error)
        return session

    def finish(self) -> None:
        result = self.session.result
        try:
            self.store.save_selected(result)
        except OSError as error:
            self.exit(result, return_code=1, message=f"Error saving selected location: {error}")
            return
        self.exit(result)

    def refresh_view(self) -> None:
        session = self.session
        screen = session.screen.value
        root = self.query_one("#root")
        root.set_classes(f"-{screen}")
        root.border_title = getattr(ScreenTitles, screen)
        self.query_one("#help", Static).update(Text.assemble(("[help] ", "bold"), session.help_text))
        self.query_one("#locations", Static).update(
            location_rows(
                session.locations,
                getattr(ScreenColors, screen),
                self.config["interface"]["max_width"],
            )
        )
        self.query_one("#hotkeys", Static).update(self.hotkey_lines())

    def hotkey_lines(self) -> Text:
        keymap = self.session.keymap
        hotkeys = {
            ScreenKind.ADD: keymap.add_screen,
            ScreenKind.DELETE: keymap.delete_screen,
            ScreenKind.SELECT: keymap.select_screen,
        }
        lines = Text()
        for screen, keys in hotkeys.items():
            if screen is self.session.screen or not keys:
                continue
            lines.append(f"[{keys[0]}] {getattr(ScreenTitles, screen.value)}\n")
        if keymap.cancel:
            lines.append(f"[{keymap.cancel[0]}] Exit")
        return lines
