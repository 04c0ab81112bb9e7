"""Locate and load the optional aisle and inflection files."""

from pathlib import Path
from typing import Literal

from cooklist.catalog.aisle import AisleMap, ConfigParseError, parse_config
from cooklist.config import get_settings
from cooklist.errors import ConfigUnparsable, ConfigUnreadable
from cooklist.logging_config import get_logger

logger = get_logger(__name__)

ConfigKind = Literal["aisle", "inflection"]


def find_config_file(
    kind: ConfigKind,
    explicit_path: Path | str | None = None,
    *,
    cwd: Path | None = None,
    config_dir: Path | None = None,
) -> Path | None:
    """
    Find the config file for ``kind``.

    Search order: the explicit path, ``./config/{kind}.conf`` and finally
    ``~/.config/cook/{kind}.conf``. The explicit path is returned even if it
    does not exist so that reading it reports the problem.
    """
    if explicit_path is not None:
        return Path(explicit_path)

    file_name = f"{kind}.conf"
    local = (cwd or Path.cwd()) / "config" / file_name
    if local.exists():
        return local

    home = (config_dir or get_settings().config_dir) / file_name
    if home.exists():
        return home

    return None


def load_config(
    kind: ConfigKind,
    explicit_path: Path | str | None = None,
    *,
    cwd: Path | None = None,
    config_dir: Path | None = None,
) -> AisleMap | None:
    """
    Load the aisle or inflection mapping, if there is one.

    A file that cannot be read is fatal. A file that was read but cannot be
    parsed is reported as a warning and treated as absent, so a shopping list
    is still produced (uncategorized) when the file has a typo.

    Raises:
        ConfigUnreadable: A config file was found but could not be read.
    """
    path = find_config_file(kind, explicit_path, cwd=cwd, config_dir=config_dir)
    if path is None:
        logger.info(f"No {kind} config found")
        return None

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigUnreadable(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ConfigUnreadable(path, e.strerror or str(e)) from e

    try:
        return _parse(path, text)
    except ConfigUnparsable as e:
        logger.warning(f"{e}; continuing without {kind} config")
        return None


def _parse(path: Path, text: str) -> AisleMap:
    try:
        config = parse_config(text)
    except ConfigParseError as e:
        raise ConfigUnparsable(path, e) from e
    logger.info(f"Loaded {len(config)} entries from {path}")
    return config
