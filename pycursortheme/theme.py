"""
Cursor theme lookup.

A theme is searched for in every root of the search path, user roots first.
Icons found in an earlier root, or in the theme itself rather than one it
inherits from, take precedence over later ones.
"""


import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Optional, Union

from .cursor import Cursor, SvgCursor, XCursor
from .index import theme_inherits
from .paths import cursor_dirs
from .shapes import CursorShape


__all__ = ['CursorTheme', 'load']

logger = logging.getLogger(__name__)

SCALABLE_DIR = 'cursors_scalable'
XCURSOR_DIR = 'cursors'
INDEX_FILE = 'index.theme'


def _discover_cursors(directory: Path,
                      cache: dict[str, Cursor],
                      factory: Callable[[Path], Cursor]) -> None:
    """Add every shape of ``directory`` that isn't cached yet."""
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.debug('cannot list %s: %s', directory, e)
        return

    files = []
    symlinks = []
    for entry in entries:
        try:
            if entry.is_symlink():
                symlinks.append(entry)
            else:
                files.append(entry)
        except OSError as e:
            logger.debug('cannot stat %s: %s', entry.path, e)

    for entry in files:
        if entry.name not in cache:
            cache[entry.name] = factory(Path(entry.path))

    # targets are looked up in the cache, so links go after regular entries
    real_directory = None
    for entry in symlinks:
        if entry.name in cache:
            continue
        if real_directory is None:
            real_directory = directory.resolve()
        try:
            target = Path(entry.path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            logger.debug('skipping broken symlink %s: %s', entry.path, e)
            continue
        if target.parent != real_directory:
            logger.debug('skipping %s, it points outside %s to %s',
                         entry.path, directory, target)
            continue

        cursor = cache.get(target.name)
        if cursor is None:
            logger.debug('skipping %s, %s is not a known cursor',
                         entry.path, target.name)
            continue
        cache[entry.name] = cursor


def _discover_theme(path: Path, cache: dict[str, Cursor]) -> None:
    scalable = path / SCALABLE_DIR
    if scalable.is_dir():
        logger.debug('scanning scalable cursors in %s', scalable)
        _discover_cursors(scalable, cache, SvgCursor)
        return

    xcursors = path / XCURSOR_DIR
    if xcursors.is_dir():
        logger.debug('scanning xcursors in %s', xcursors)
        _discover_cursors(xcursors, cache, XCursor)


def _discover(name: str,
              search_path: Iterable[Path],
              cache: dict[str, Cursor]) -> None:
    search_path = [Path(root) for root in search_path]
    stack = [name]
    visited = set()

    while stack:
        name = stack.pop()
        if name in visited:
            logger.warning('inheritance cycle through theme %r, stopping', name)
            continue
        visited.add(name)

        inherits = None
        for root in search_path:
            path = root / name
            if not path.is_dir():
                continue
            _discover_theme(path, cache)

            if inherits is None:
                inherits = theme_inherits(path / INDEX_FILE)

        if inherits is not None:
            logger.debug('theme %r inherits %r', name, inherits)
            stack.append(inherits)


class CursorTheme(Mapping[str, Cursor]):
    """
    The cursors of a theme and of every theme it inherits, by shape name.

    Shapes that are symlinks to another shape share its ``Cursor`` object.
    """

    def __init__(self, name: str, cursors: dict[str, Cursor]):
        self.name = name
        self._cursors = MappingProxyType(cursors)

    @classmethod
    def load(cls, name: str,
             search_path: Optional[Iterable[Union[str, os.PathLike]]] = None
             ) -> Optional['CursorTheme']:
        """
        Look up the theme called ``name``.

        ``search_path`` defaults to the XDG icon directories. Returns ``None``
        when neither the theme nor any theme it inherits has a cursor.
        """
        if search_path is None:
            search_path = cursor_dirs()

        cache = {}
        _discover(name, search_path, cache)
        if not cache:
            logger.debug('no cursors found for theme %r', name)
            return None
        return cls(name, cache)

    def icon(self, shape: Union[str, CursorShape]) -> Optional[Cursor]:
        return self._cursors.get(str(shape))

    def find(self, shape: Union[str, CursorShape]) -> Optional[Cursor]:
        """Like ``icon``, falling back to the legacy names of a standard shape."""
        try:
            names = CursorShape(str(shape)).names
        except ValueError:
            names = (str(shape),)
        for name in names:
            cursor = self._cursors.get(name)
            if cursor is not None:
                return cursor
        return None

    def __getitem__(self, shape: str) -> Cursor:
        return self._cursors[str(shape)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cursors)

    def __len__(self) -> int:
        return len(self._cursors)

    def __repr__(self) -> str:
        return f'<CursorTheme {self.name!r} with {len(self)} cursors>'


def load(name: str,
         search_path: Optional[Iterable[Union[str, os.PathLike]]] = None
         ) -> Optional[CursorTheme]:
    return CursorTheme.load(name, search_path)
