"""Configuration for the sht-colour CLI.

The conversion core takes precision explicitly and reads no configuration.
Only the CLI consults the environment, and only for its default precision:

  1. -p/--precision on the command line.
  2. SHT_PRECISION from the OS environment.
  3. SHT_PRECISION from a .env file (--env-file, or the nearest .env walking up
     from cwd, never crossing a .git boundary). Existing OS variables win.
  4. DEFAULT_PRECISION, for commands that need one.
"""

import os
from pathlib import Path

from sht_colour.core.errors import InvalidPrecision
from sht_colour.core.model import check_precision

PRECISION_ENV = 'SHT_PRECISION'
DEFAULT_PRECISION = 2


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, or None once a .git (dir or file) is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and malformed lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ without overwriting. Returns the file used."""
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def resolve_precision(explicit: int | None = None) -> int | None:
    """Explicit precision, else SHT_PRECISION, else None. Invalid values raise InvalidPrecision."""
    if explicit is not None:
        return check_precision(explicit)
    raw = os.environ.get(PRECISION_ENV, '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise InvalidPrecision(raw) from None
    return check_precision(value)
