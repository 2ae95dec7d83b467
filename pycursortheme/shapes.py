"""
Standard cursor shape names.

Themes name their icons after the CSS cursor keywords, but many older themes
only ship the traditional X11 names. Each shape lists those legacy names, most
common first.
"""


import enum


__all__ = ['CursorShape']


class CursorShape(str, enum.Enum):

    def __new__(cls, name: str, *legacy_names: str):
        obj = str.__new__(cls, name)
        obj._value_ = name
        obj.legacy_names = legacy_names
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def names(self) -> tuple[str, ...]:
        return (self.value,) + self.legacy_names

    DEFAULT = 'default', 'left_ptr', 'arrow', 'top_left_arrow'
    CONTEXT_MENU = 'context-menu'
    HELP = 'help', 'question_arrow', 'whats_this', 'left_ptr_help'
    POINTER = 'pointer', 'hand2', 'hand1', 'hand', 'pointing_hand'
    PROGRESS = 'progress', 'left_ptr_watch', 'half-busy'
    WAIT = 'wait', 'watch', 'clock'
    CELL = 'cell', 'plus'
    CROSSHAIR = 'crosshair', 'cross', 'tcross'
    TEXT = 'text', 'xterm', 'ibeam'
    VERTICAL_TEXT = 'vertical-text'
    ALIAS = 'alias', 'dnd-link'
    COPY = 'copy', 'dnd-copy'
    MOVE = 'move', 'dnd-move', 'fleur'
    NO_DROP = 'no-drop', 'dnd-none'
    NOT_ALLOWED = 'not-allowed', 'crossed_circle', 'forbidden'
    GRAB = 'grab', 'openhand', 'hand1'
    GRABBING = 'grabbing', 'closedhand', 'dnd-none'
    E_RESIZE = 'e-resize', 'right_side'
    N_RESIZE = 'n-resize', 'top_side'
    NE_RESIZE = 'ne-resize', 'top_right_corner'
    NW_RESIZE = 'nw-resize', 'top_left_corner'
    S_RESIZE = 's-resize', 'bottom_side'
    SE_RESIZE = 'se-resize', 'bottom_right_corner'
    SW_RESIZE = 'sw-resize', 'bottom_left_corner'
    W_RESIZE = 'w-resize', 'left_side'
    EW_RESIZE = 'ew-resize', 'sb_h_double_arrow', 'h_double_arrow', 'size_hor'
    NS_RESIZE = 'ns-resize', 'sb_v_double_arrow', 'v_double_arrow', 'size_ver'
    NESW_RESIZE = 'nesw-resize', 'fd_double_arrow', 'size_bdiag'
    NWSE_RESIZE = 'nwse-resize', 'bd_double_arrow', 'size_fdiag'
    COL_RESIZE = 'col-resize', 'split_h', 'sb_h_double_arrow'
    ROW_RESIZE = 'row-resize', 'split_v', 'sb_v_double_arrow'
    ALL_SCROLL = 'all-scroll', 'fleur'
    ZOOM_IN = 'zoom-in'
    ZOOM_OUT = 'zoom-out'
