"""Settings for linguist-colors: .env loading plus environment lookups.

Precedence (first wins):
  1. Command-line flags.
  2. Existing OS environment variables.
  3. .env at --env-file, or the first .env found walking up from cwd.

The walk stops at the nearest .git (dir or worktree file), so a .env from
outside the repo is never picked up. Loading never overwrites a variable
that is already set.

Variables:
  LINGUIST_COLORS_URL        catalog URL or local languages.yml path
  LINGUIST_COLORS_TIMEOUT    HTTP timeout in seconds
  LINGUIST_COLORS_CACHE_DIR  directory for the cached catalog download
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CATALOG_URL = 'https://raw.githubusercontent.com/github/linguist/master/lib/linguist/languages.yml'
DEFAULT_TIMEOUT = 30.0


@dataclass
class Settings:
    catalog: str = DEFAULT_CATALOG_URL
    timeout: float = DEFAULT_TIMEOUT
    cache_dir: str | None = None
    strict: bool = False


def _find_dotenv(start: Path) -> Path | None:
    for directory in [start.resolve(), *start.resolve().parents]:
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts quotes and a leading 'export '."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load a .env into os.environ for keys not already set.

    Returns the path that was loaded, or None.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f'{name} must be a number, got {raw!r}') from None


def resolve_settings(
    catalog: str | None = None,
    timeout: float | None = None,
    cache_dir: str | None = None,
    strict: bool = False,
) -> Settings:
    """Combine explicit values with LINGUIST_COLORS_* environment variables."""
    return Settings(
        catalog=catalog or os.environ.get('LINGUIST_COLORS_URL') or DEFAULT_CATALOG_URL,
        timeout=timeout if timeout is not None else _env_float('LINGUIST_COLORS_TIMEOUT', DEFAULT_TIMEOUT),
        cache_dir=cache_dir or os.environ.get('LINGUIST_COLORS_CACHE_DIR') or None,
        strict=strict,
    )
