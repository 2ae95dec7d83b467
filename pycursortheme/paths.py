"""
Search path for cursor themes, following the XDG base directory conventions.
"""


import functools
import os
from pathlib import Path

from .errors import MissingHomeError


__all__ = ['cursor_dirs']

DEFAULT_SYSTEM_ICONS = Path('/usr/share/icons')


def _home() -> Path:
    home = os.environ.get('XDG_HOME') or os.environ.get('HOME')
    if not home:
        raise MissingHomeError('$HOME is not set')
    return Path(home)


def _user_theme_dirs() -> list[Path]:
    home = _home()
    data_home = os.environ.get('XDG_DATA_HOME')
    data_home = Path(data_home) if data_home else home / '.local' / 'share'
    return [data_home / 'icons', home / '.icons']


def _system_theme_dirs() -> list[Path]:
    data_dirs = os.environ.get('XDG_DATA_DIRS')
    if not data_dirs:
        return [DEFAULT_SYSTEM_ICONS]
    return [Path(d) / 'icons' for d in data_dirs.split(':') if d]


@functools.lru_cache(maxsize=None)
def cursor_dirs() -> tuple[Path, ...]:
    """
    Roots to search for theme folders, user roots first.

    Computed on first use and reused for the rest of the process; whether the
    directories exist is only checked when a theme is looked up.
    """
    return tuple(_user_theme_dirs() + _system_theme_dirs())
