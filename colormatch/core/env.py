"""Configuration for colormatch: .env loading and Settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  COLORMATCH_COUNT    default number of matches (int >= 0, default 5)
  COLORMATCH_PALETTE  path to a JSON palette file used instead of the built-in one
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from colormatch.core.matcher import DEFAULT_COUNT

ENV_COUNT = 'COLORMATCH_COUNT'
ENV_PALETTE = 'COLORMATCH_PALETTE'


@dataclass(frozen=True)
class Settings:
    count: int = DEFAULT_COUNT
    palette_path: str | None = None
    env_path: Path | None = None  # .env file that was loaded, if any


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start to the first .env, giving up at a .git boundary or the filesystem root."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts quotes and an optional 'export ' prefix."""
    result: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Fill os.environ from a .env file for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings_from_env(environ: Mapping[str, str] | None = None, env_path: Path | None = None) -> Settings:
    """Build Settings from environment variables. Raises ValueError on bad values."""
    environ = os.environ if environ is None else environ

    raw_count = environ.get(ENV_COUNT, '').strip()
    count = DEFAULT_COUNT
    if raw_count:
        try:
            count = int(raw_count)
        except ValueError:
            raise ValueError(f'{ENV_COUNT} must be an integer, got {raw_count!r}') from None
        if count < 0:
            raise ValueError(f'{ENV_COUNT} must be >= 0, got {count}')

    palette_path = environ.get(ENV_PALETTE, '').strip() or None
    return Settings(count=count, palette_path=palette_path, env_path=env_path)


def load_settings(env_file: str | None = None) -> Settings:
    """Load .env (if any) then read Settings from the environment."""
    env_path = load_env(env_file)
    return settings_from_env(env_path=env_path)
