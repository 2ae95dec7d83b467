"""
Decoder for the xcursor file format.
Reference: https://man.archlinux.org/man/Xcursor.3
"""


import io
import logging
import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Union

import numpy as np

from .errors import XcursorError


__all__ = ['XcursorImage', 'parse_xcursor', 'open_xcursor']

logger = logging.getLogger(__name__)

MAGIC = b'Xcur'
COMMENT_TYPE = 0xfffe0001
IMAGE_TYPE = 0xfffd0002

# width and height of a single image are capped by the format
MAX_IMAGE_SIDE = 0x7fff


@dataclass
class XcursorImage:
    """One image chunk of an xcursor file."""
    size: int  # nominal size, the chunk subtype
    width: int
    height: int
    xhot: int
    yhot: int
    delay: int  # milliseconds
    pixels_rgba: bytes = field(repr=False)


def _read(f: io.BytesIO, fmt: str, what: str) -> tuple:
    size = struct.calcsize(fmt)
    data = f.read(size)
    if len(data) != size:
        raise XcursorError(f'truncated {what}')
    return struct.unpack(fmt, data)


def _argb_to_rgba(data: bytes, width: int, height: int) -> bytes:
    # pixels are little endian ARGB words, so the bytes come in as BGRA
    pixel_array = np.frombuffer(data, np.ubyte).reshape((height, width, 4))
    pixel_array = np.stack(
        (pixel_array[:, :, 2],
         pixel_array[:, :, 1],
         pixel_array[:, :, 0],
         pixel_array[:, :, 3]),
        axis=2)
    return pixel_array.tobytes()


def parse_xcursor(data: bytes) -> list[XcursorImage]:
    """Decode every image chunk of an xcursor file, in table of contents order."""
    f = io.BytesIO(data)

    magic_str = f.read(4)
    if magic_str != MAGIC:
        raise XcursorError(f'bad magic string {magic_str!r}')

    header_size, = _read(f, '<I', 'file header')
    if header_size < 16:
        raise XcursorError(f'header size {header_size} is too small')
    logger.debug('header size: %d', header_size)

    fv0, fv1, fv2, fv3, n_entry = _read(f, '<BBBBI', 'file header')
    logger.debug('file version: %d.%d.%d.%d, %d toc entries',
                 fv3, fv2, fv1, fv0, n_entry)

    # the table of contents starts right after the header, whatever it claims
    f.seek(header_size)
    chunks = []
    for i in range(n_entry):
        chunk_type, chunk_subtype, chunk_position = _read(
            f, '<III', 'table of contents')
        if chunk_type != IMAGE_TYPE:
            if chunk_type != COMMENT_TYPE:
                logger.debug('toc entry %d: unknown chunk type %s, skipping',
                             i, hex(chunk_type))
            continue
        chunks.append((chunk_subtype, chunk_position))

    images = []
    for i, (toc_subtype, chunk_position) in enumerate(chunks):
        if chunk_position >= len(data):
            raise XcursorError(f'chunk {i} points past the end of the file')
        f.seek(chunk_position)
        chunk_header_size, actual_type, subtype, version = _read(
            f, '<IIII', 'chunk header')
        if actual_type != IMAGE_TYPE:
            logger.debug('chunk %d: toc says image but chunk type is %s, '
                         'skipping', i, hex(actual_type))
            continue
        if subtype != toc_subtype:
            logger.debug('chunk %d: toc size %d and chunk size %d differ, '
                         'using chunk size', i, toc_subtype, subtype)

        w, h, xhot, yhot, delay = _read(f, '<IIIII', 'image header')
        if w > MAX_IMAGE_SIDE or h > MAX_IMAGE_SIDE:
            raise XcursorError(f'chunk {i}: image of {w}x{h} is too large')
        if xhot > w or yhot > h:
            raise XcursorError(
                f'chunk {i}: hotspot ({xhot}, {yhot}) outside {w}x{h} image')

        # image data always follows the 36 byte header
        f.seek(chunk_position + chunk_header_size)
        pixel_data = f.read(w * h * 4)
        if len(pixel_data) != w * h * 4:
            raise XcursorError(f'chunk {i}: truncated pixel data')

        images.append(XcursorImage(
            size=subtype,
            width=w,
            height=h,
            xhot=xhot,
            yhot=yhot,
            delay=delay,
            pixels_rgba=_argb_to_rgba(pixel_data, w, h),
        ))

    return images


def open_xcursor(file: Union[BinaryIO, str, os.PathLike]) -> list[XcursorImage]:
    """load a xcursor file"""
    if isinstance(file, (str, os.PathLike)):
        with open(file, 'rb') as f:
            data = f.read()
    else:
        data = file.read()
    return parse_xcursor(data)
