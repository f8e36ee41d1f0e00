"""Flat section/key settings files.

Reads and writes the ``[Section]`` / ``key=value`` text format used by the
profile registry store. Values with leading or trailing whitespace are
written inside double quotes, and one pair of surrounding quotes is removed
on read.

Contract:
- Inputs: File paths, section -> key -> string mappings
- Outputs: Parsed mappings, typed values with fallbacks
- Side Effects: save_ini writes atomically through a temp file
"""

import configparser
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

Sections = dict[str, dict[str, str]]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] == '"'


def _quote(value: str) -> str:
    """Wrap values the parser would change on read in double quotes.

    Surrounding whitespace is stripped when a file is read, and a value that
    is itself quoted would lose its quotes in _unquote.
    """
    if value != value.strip() or _is_quoted(value):
        return f'"{value}"'
    return value


def _unquote(value: str) -> str:
    return value[1:-1] if _is_quoted(value) else value


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, delimiters=("=",), strict=False)
    # keys such as nCount and P[1] are case-sensitive
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def load_ini(path: Path) -> Sections | None:
    """Load a settings file.

    Args:
        path: File to read

    Returns:
        Mapping of section name to key/value pairs, or None if the file
        does not exist or cannot be parsed

    Example:
        >>> data = load_ini(Path("app_prof.ini"))
        >>> data["Profile"]["nCount"] if data else None
    """
    if not path.is_file():
        logger.debug(f"Settings file not found: {path}")
        return None

    parser = _new_parser()
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(f)
    except (configparser.Error, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Failed to read settings file {path}: {e}")
        return None

    return {
        section: {key: _unquote(value) for key, value in parser.items(section)} for section in parser.sections()
    }


def save_ini(path: Path, data: Sections, header: str | None = None) -> None:
    """Save a settings file with atomic write.

    Args:
        path: Destination file
        data: Mapping of section name to key/value pairs
        header: Optional comment written as the first line

    Raises:
        OSError: If the file cannot be written
    """
    parser = _new_parser()
    for section, values in data.items():
        parser[section] = {key: _quote(value) for key, value in values.items()}

    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            if header:
                f.write(f"; {header}\n")
            parser.write(f, space_around_delimiters=False)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Saved settings file: {path}")


def get_int(values: dict[str, str], key: str, fallback: int) -> int:
    """Read an integer value, returning ``fallback`` if missing or malformed."""
    raw = values.get(key)
    if raw is None:
        return fallback
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {key}: {raw!r}")
        return fallback


def get_bool(values: dict[str, str], key: str, fallback: bool) -> bool:
    """Read a boolean value, returning ``fallback`` if missing or malformed."""
    raw = values.get(key)
    if raw is None:
        return fallback
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring non-boolean value for {key}: {raw!r}")
    return fallback


def format_bool(value: bool) -> str:
    return "1" if value else "0"
