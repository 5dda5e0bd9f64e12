"""Environment configuration for colour-type.

Settings come from OS environment variables. A .env file can fill in any
that are missing:
  1. Existing OS environment variables always win.
  2. The file given with --env-file, if any.
  3. Otherwise the first .env found walking up from cwd, stopping at .git.

Variables:
  COLOUR_TYPE_PALETTE_LIMIT      number of palette colours (default 5)
  COLOUR_TYPE_PALETTE_PRECISION  pixel sampling stride (default 5)
  COLOUR_TYPE_STRICT             reject malformed hex text (default off)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PREFIX = 'COLOUR_TYPE_'
_TRUTHY = {'1', 'true', 'yes', 'on'}


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a repo root."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around values are dropped, '#' lines skipped."""
    pairs: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            pairs[key] = value.strip().strip('"').strip("'")
    return pairs


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys that are not set yet.

    Returns the file that was read, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(PREFIX + name, '').strip()
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Defaults used by the CLI when no flag overrides them."""

    palette_limit: int = 5
    palette_precision: int = 5
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            palette_limit=_env_int(env, 'PALETTE_LIMIT', defaults.palette_limit),
            palette_precision=_env_int(env, 'PALETTE_PRECISION', defaults.palette_precision),
            strict=_env_bool(env, 'STRICT', defaults.strict),
        )
