"""
The two kinds of cursor icon found in a theme, and the frames they produce.

``XCursor`` is a single xcursor file with one or more embedded sizes.
``SvgCursor`` is a ``cursors_scalable`` directory: a ``metadata.json``
listing one SVG document per animation frame.
"""


import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from . import svg
from .errors import MetadataError, SvgRenderError, XcursorError
from .xcursor import XcursorImage, open_xcursor


__all__ = ['CursorFrame', 'Meta', 'XCursor', 'SvgCursor', 'Cursor']

logger = logging.getLogger(__name__)

METADATA_FILE = 'metadata.json'


@dataclass
class CursorFrame:
    size: int  # nominal size
    width: int
    height: int
    xhot: int  # hotspot in output pixels
    yhot: int
    delay: int  # milliseconds, 0 when not set
    pixels: bytes = field(repr=False)  # rgba, row major

    @classmethod
    def from_xcursor(cls, image: XcursorImage) -> 'CursorFrame':
        return cls(
            size=image.size,
            width=image.width,
            height=image.height,
            xhot=image.xhot,
            yhot=image.yhot,
            delay=image.delay,
            pixels=image.pixels_rgba,
        )

    def to_pil(self) -> Image.Image:
        return Image.frombytes('RGBA', (self.width, self.height), self.pixels)


@dataclass(frozen=True)
class Meta:
    """One frame of a scalable cursor, as listed in metadata.json."""
    filename: str
    hotspot_x: float
    hotspot_y: float
    nominal_size: float
    delay: int = 0

    @classmethod
    def from_json(cls, record) -> 'Meta':
        if not isinstance(record, dict):
            raise MetadataError(f'expected an object, got {record!r}')
        try:
            filename = record['filename']
            hotspot_x = record['hotspot_x']
            hotspot_y = record['hotspot_y']
            nominal_size = record['nominal_size']
        except KeyError as e:
            raise MetadataError(f'missing field {e.args[0]!r}') from e
        delay = record.get('delay', 0)

        if not isinstance(filename, str):
            raise MetadataError(f'filename must be a string, got {filename!r}')
        for name, value in (('hotspot_x', hotspot_x),
                            ('hotspot_y', hotspot_y),
                            ('nominal_size', nominal_size)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MetadataError(f'{name} must be a number, got {value!r}')
            try:
                finite = math.isfinite(value)
            except OverflowError:
                finite = False
            if not finite:
                raise MetadataError(f'{name} must be finite, got {value!r}')
        if hotspot_x < 0 or hotspot_y < 0:
            raise MetadataError(
                f'hotspot must not be negative, got ({hotspot_x}, {hotspot_y})')
        if nominal_size <= 0:
            raise MetadataError(f'nominal_size must be positive, got {nominal_size}')
        if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
            raise MetadataError(f'delay must be a non-negative integer, got {delay!r}')

        return cls(filename, float(hotspot_x), float(hotspot_y),
                   float(nominal_size), delay)


def read_metadata(path: Path) -> Optional[list[Meta]]:
    """Parse a metadata.json, ``None`` when it can't be read."""
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.debug('cannot read %s: %s', path, e)
        return None
    if not text.strip():
        return None

    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataError(f'{path}: {e}') from e
    if not isinstance(records, list):
        raise MetadataError(f'{path}: expected a list of frames')
    try:
        return [Meta.from_json(record) for record in records]
    except MetadataError as e:
        raise MetadataError(f'{path}: {e}') from e


@dataclass(frozen=True)
class XCursor:
    path: Path

    def frames(self, size: int) -> Optional[list[CursorFrame]]:
        """Frames of the embedded size closest to ``size``, in file order."""
        try:
            images = open_xcursor(self.path)
        except OSError as e:
            logger.debug('cannot read %s: %s', self.path, e)
            return None
        except XcursorError as e:
            logger.debug('%s is not a valid xcursor file: %s', self.path, e)
            return None
        if not images:
            return None

        # min() keeps the first of equally close sizes
        nearest = min(images, key=lambda image: abs(image.size - size)).size
        return [CursorFrame.from_xcursor(image)
                for image in images if image.size == nearest]


@dataclass(frozen=True)
class SvgCursor:
    path: Path

    def frames(self, size: int) -> Optional[list[CursorFrame]]:
        """
        Every frame rendered for ``size``, in metadata order.

        Raises ``MetadataError`` for a malformed metadata.json and
        ``SvgRenderError`` when a frame can't be read or rendered; a bad
        frame fails the whole call.
        """
        metadata = read_metadata(self.path / METADATA_FILE)
        if not metadata:
            return None
        return [self._render(meta, size) for meta in metadata]

    def _render(self, meta: Meta, size: int) -> CursorFrame:
        svg_path = self.path / meta.filename
        try:
            data = svg_path.read_bytes()
        except OSError as e:
            raise SvgRenderError(f'cannot read {svg_path}: {e}') from e

        scale = size / meta.nominal_size
        try:
            rendered = svg.rasterize(data, scale)
        except SvgRenderError as e:
            raise SvgRenderError(f'{svg_path}: {e}') from e

        return CursorFrame(
            size=size,
            width=rendered.width,
            height=rendered.height,
            xhot=int(meta.hotspot_x * scale),
            yhot=int(meta.hotspot_y * scale),
            delay=meta.delay,
            pixels=rendered.pixels_rgba,
        )


Cursor = Union[XCursor, SvgCursor]
