__all__ = [
    'CursorThemeError',
    'MissingHomeError',
    'XcursorError',
    'MetadataError',
    'SvgRenderError',
]


class CursorThemeError(Exception):
    """Base class for every error raised by pycursortheme."""


class MissingHomeError(CursorThemeError):
    """Neither $XDG_HOME nor $HOME is set, so user icon dirs can't be located."""


class XcursorError(CursorThemeError, ValueError):
    """The bytes are not a valid Xcursor file."""


class MetadataError(CursorThemeError, ValueError):
    """A cursors_scalable metadata.json document is malformed."""


class SvgRenderError(CursorThemeError):
    """An SVG cursor frame can't be read or rendered."""
