from dataclasses import dataclass, field, replace

from .screens import (
    INITIAL_HELP,
    SaveLocations,
    ScreenKind,
    handle_screen_key,
)


def _key_names(value, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    # a lone key name is accepted in place of a list
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Keymap:
    """Key names for the global hotkeys. Each action accepts several keys."""

    cancel: tuple[str, ...] = ("escape", "ctrl+c")
    add_screen: tuple[str, ...] = ("ctrl+a",)
    delete_screen: tuple[str, ...] = ("ctrl+d",)
    select_screen: tuple[str, ...] = ("ctrl+s",)

    @classmethod
    def from_config(cls, keybinds: dict) -> "Keymap":
        defaults = cls()
        return cls(
            cancel=_key_names(keybinds.get("cancel"), defaults.cancel),
            add_screen=_key_names(keybinds.get("add_screen"), defaults.add_screen),
            delete_screen=_key_names(keybinds.get("delete_screen"), defaults.delete_screen),
            select_screen=_key_names(keybinds.get("select_screen"), defaults.select_screen),
        )

    def screen_for(self, key: str) -> ScreenKind | None:
        """Return the screen a hotkey switches to, if any."""
        if key in self.add_screen:
            return ScreenKind.ADD
        if key in self.delete_screen:
            return ScreenKind.DELETE
        if key in self.select_screen:
            return ScreenKind.SELECT
        return None


@dataclass(frozen=True)
class Session:
    """One run of the interactive picker.

    The session is a value: every transition returns a new Session. The
    bindings held here are the source of truth for the whole run; the store on
    disk is only ever written to, never read back.

    Attributes:
        locations (dict[str, str]): The current bindings.
        starting_directory (str): The working directory when the run started.
            Selected when the user cancels.
        screen (ScreenKind): The active screen.
        help_text (str): The help line shown above the bindings.
        terminal (bool): Whether the run is over.
        result (str | None): The selected path, set once the run is over.
        keymap (Keymap): Global hotkeys.
    """

    locations: dict[str, str]
    starting_directory: str
    screen: ScreenKind = ScreenKind.SELECT
    help_text: str = INITIAL_HELP[ScreenKind.SELECT]
    terminal: bool = False
    result: str | None = None
    keymap: Keymap = field(default_factory=Keymap)

    def handle_key(self, key: str) -> tuple["Session", SaveLocations | None]:
        """
        Process one key press.

        Args:
            key (str): A single character, or a key name such as `escape`.

        Returns:
            tuple[Session, SaveLocations | None]: The next session and the
                persistence effect to run before the next key, if any.
        """
        if self.terminal:
            return self, None
        if key in self.keymap.cancel:
            return self.finish(self.starting_directory), None
        if (screen := self.keymap.screen_for(key)) is not None:
            return self.switch_to(screen), None

        update = handle_screen_key(self.screen, key, self.locations, self.starting_directory)
        session = replace(self, locations=update.locations, help_text=update.help_text)
        if update.selected is not None:
            return session.finish(update.selected), None
        return session, update.effect

    def switch_to(self, screen: ScreenKind) -> "Session":
        return replace(self, screen=screen, help_text=INITIAL_HELP[screen])

    def finish(self, result: str) -> "Session":
        return replace(self, terminal=True, result=result)

    def save_failed(self, error: Exception) -> "Session":
        """Report a failed save in the help line. Bindings are left as they are."""
        reason = getattr(error, "strerror", None) or str(error)
        return replace(self, help_text=f"Could not save locations: {reason}")
