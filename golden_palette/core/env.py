"""Environment and settings for golden-palette.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  GOLDEN_PALETTE_BASE     default base colour (default #ff0000)
  GOLDEN_PALETTE_LIBRARY  base colour library file (default ~/.golden_palette.json)
"""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_BASE = 'GOLDEN_PALETTE_BASE'
ENV_LIBRARY = 'GOLDEN_PALETTE_LIBRARY'

DEFAULT_BASE = '#ff0000'
DEFAULT_LIBRARY = '~/.golden_palette.json'


@dataclass(frozen=True)
class Settings:
    base: str = DEFAULT_BASE
    library_path: Path = Path(DEFAULT_LIBRARY).expanduser()


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes and a leading 'export ' are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
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
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment (os.environ unless given)."""
    env = os.environ if environ is None else environ
    library = env.get(ENV_LIBRARY)
    return Settings(
        base=env.get(ENV_BASE) or DEFAULT_BASE,
        library_path=Path(library or DEFAULT_LIBRARY).expanduser(),
    )
