import io
import json
import os
import struct
from pathlib import Path

import numpy as np
import pytest

from pycursortheme.paths import cursor_dirs

try:
    import cairosvg  # noqa: F401
    HAVE_CAIRO = True
except (ImportError, OSError):
    HAVE_CAIRO = False

needs_cairo = pytest.mark.skipif(not HAVE_CAIRO, reason='cairo is not available')

IMAGE_TYPE = 0xfffd0002
COMMENT_TYPE = 0xfffe0001


def solid_rgba(width, height, rgba):
    return bytes(rgba) * (width * height)


def xcursor_bytes(images, comment=None):
    """
    Build an xcursor file.

    ``images`` holds ``(size, width, height, xhot, yhot, delay, rgba)`` tuples.
    """
    f = io.BytesIO()
    n_toc = len(images) + (comment is not None)

    f.write(b'Xcur')
    f.write(struct.pack('<I', 16))
    f.write(struct.pack('<BBBB', 0, 0, 1, 0))
    f.write(struct.pack('<I', n_toc))

    # leave room for the toc, it is filled in as chunks are written
    toc_pointer = f.tell()
    f.write(bytes(n_toc * 4 * 3))

    def add_toc(chunk_type, subtype):
        nonlocal toc_pointer
        chunk_start = f.tell()
        f.seek(toc_pointer)
        f.write(struct.pack('<III', chunk_type, subtype, chunk_start))
        toc_pointer = f.tell()
        f.seek(chunk_start)

    if comment is not None:
        data = comment.encode()
        add_toc(COMMENT_TYPE, 1)
        f.write(struct.pack('<IIIII', 20, COMMENT_TYPE, 1, 1, len(data)))
        f.write(data)

    for size, w, h, xhot, yhot, delay, rgba in images:
        add_toc(IMAGE_TYPE, size)
        f.write(struct.pack('<IIIIIIIII',
                            36, IMAGE_TYPE, size, 1, w, h, xhot, yhot, delay))
        # RGBA to little endian ARGB words
        img_array = np.frombuffer(rgba, np.ubyte).reshape((h, w, 4))
        img_array = np.stack(
            (img_array[:, :, 2],
             img_array[:, :, 1],
             img_array[:, :, 0],
             img_array[:, :, 3]),
            2)
        f.write(img_array.tobytes())

    return f.getvalue()


def square_image(size, rgba=(255, 0, 0, 255), delay=0):
    return (size, size, size, size // 2, size // 2, delay,
            solid_rgba(size, size, rgba))


def svg_document(width, height, color='#ff0000'):
    return (f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">'
            f'<rect width="{width}" height="{height}" fill="{color}"/>'
            f'</svg>').encode()


class ThemeBuilder:
    """Lays out cursor themes under one search root."""

    def __init__(self, root: Path):
        self.root = root

    def theme(self, name, inherits=None, index=None):
        path = self.root / name
        path.mkdir(parents=True, exist_ok=True)
        if index is not None:
            (path / 'index.theme').write_text(index)
        elif inherits is not None:
            (path / 'index.theme').write_text(
                f'[Icon Theme]\nName={name}\nInherits={inherits}\n')
        return path

    def xcursor(self, theme, shape, images):
        directory = self.root / theme / 'cursors'
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / shape
        path.write_bytes(xcursor_bytes(images))
        return path

    def svg_cursor(self, theme, shape, frames):
        """``frames`` holds ``(svg bytes, meta dict)`` pairs."""
        directory = self.root / theme / 'cursors_scalable' / shape
        directory.mkdir(parents=True, exist_ok=True)
        metadata = []
        for i, (data, meta) in enumerate(frames):
            filename = f'{shape}-{i:02}.svg'
            (directory / filename).write_bytes(data)
            metadata.append(dict(meta, filename=filename))
        (directory / 'metadata.json').write_text(json.dumps(metadata))
        return directory

    def symlink(self, theme, shape, target, kind='cursors'):
        link = self.root / theme / kind / shape
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, link)
        return link


@pytest.fixture
def roots(tmp_path):
    """Two search roots, user then system."""
    user = tmp_path / 'user'
    system = tmp_path / 'system'
    user.mkdir()
    system.mkdir()
    return ThemeBuilder(user), ThemeBuilder(system)


@pytest.fixture
def builder(roots):
    return roots[0]


@pytest.fixture
def search_path(roots):
    return [b.root for b in roots]


@pytest.fixture(autouse=True)
def fresh_cursor_dirs():
    cursor_dirs.cache_clear()
    yield
    cursor_dirs.cache_clear()
