from dataclasses import dataclass

APP_NAME = "favdirs"

LOCATIONS_FILE = "locations"
SELECT_FILE = "select"

# shell integration block markers
START_COMMENT = "# favdirs-cmd-def"
END_COMMENT = "# favdirs-cmd-end"


@dataclass
class ScreenTitles:
    select = "Select directory"
    add = "Add directory"
    delete = "Delete directory"


@dataclass
class ScreenColors:
    select = "green"
    add = "yellow"
    delete = "red"
