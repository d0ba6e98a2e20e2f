from pathlib import Path

from favdirs.core import LocationStore

SAMPLE_LOCATIONS = "a=/home/u/proj\nb=/home/u/docs\n"


# Let the exceptions roam wild
def make_store(directory: Path, content: str | None = None) -> LocationStore:
    locations_file = directory / "locations"
    if content is not None:
        locations_file.write_text(content, encoding="utf-8")
    return LocationStore(str(locations_file), str(directory / "select"))


def write_user_config(directory: Path, data_dir: Path) -> Path:
    config_file = directory / "config.toml"
    config_file.write_text(
        f'[settings]\ndata_dir = "{data_dir.as_posix()}"\n\n'
        f'[shell]\nrc_file = "{(directory / "bashrc").as_posix()}"\n',
        encoding="utf-8",
    )
    return config_file
