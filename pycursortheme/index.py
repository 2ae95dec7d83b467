"""
Reader for the ``index.theme`` file of a cursor theme.

Only the ``Inherits`` key is of interest; the rest of the file is ignored.
"""


import itertools
import logging
import os
from typing import Optional, Union


__all__ = ['theme_inherits']

logger = logging.getLogger(__name__)

INHERITS = 'Inherits'


def _is_separator(ch: str) -> bool:
    return ch.isspace() or ch in ',;'


def _parse_inherits(line: str) -> Optional[str]:
    if not line.startswith(INHERITS):
        return None
    rest = line[len(INHERITS):].lstrip()
    if not rest.startswith('='):
        return None

    value = itertools.dropwhile(_is_separator, rest[1:])
    value = ''.join(itertools.takewhile(lambda ch: not _is_separator(ch), value))
    return value or None


def theme_inherits(path: Union[str, os.PathLike]) -> Optional[str]:
    """Name of the theme inherited by the theme at ``path``, if any."""
    try:
        with open(path, 'rb') as f:
            content = f.read().decode('utf-8', errors='replace')
    except OSError as e:
        logger.debug('cannot read %s: %s', path, e)
        return None

    # splitlines copes with both LF and CRLF endings
    for line in content.splitlines():
        inherits = _parse_inherits(line)
        if inherits is not None:
            return inherits
    return None
