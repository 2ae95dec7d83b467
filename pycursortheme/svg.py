"""
Rasterize SVG cursor frames with cairosvg.
"""


import io
from typing import NamedTuple

from PIL import Image

from .errors import SvgRenderError


__all__ = ['RenderedSvg', 'rasterize']


class RenderedSvg(NamedTuple):
    width: int
    height: int
    pixels_rgba: bytes


def rasterize(data: bytes, scale: float) -> RenderedSvg:
    """
    Render an SVG document at ``scale`` times its intrinsic size.

    The output is truncated to whole pixels, the same way cairo sizes its
    surface.
    """
    # cairosvg loads libcairo when imported
    import cairosvg

    try:
        png = cairosvg.svg2png(bytestring=data, scale=scale)
    except Exception as e:
        raise SvgRenderError(f'cannot render svg: {e}') from e

    with Image.open(io.BytesIO(png)) as img:
        img = img.convert('RGBA')
        return RenderedSvg(img.width, img.height, img.tobytes())
