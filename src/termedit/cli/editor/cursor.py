"""Cursor movement and viewport scrolling."""

from __future__ import annotations

from termedit.cli.core.input import Key
from termedit.cli.editor.state import EditorState
from termedit.core.constants import TAB_STOP
from termedit.core.row import Row


def to_render_column(row: Row, x: int) -> int:
    """Convert a buffer column to a column in ``row.render``; a tab spans TAB_STOP columns."""
    return sum(TAB_STOP if ch == "\t" else 1 for ch in row.chars[:x])


def to_buffer_column(row: Row, rx: int) -> int:
    """Convert a render column back to the buffer column that covers it."""
    cur_rx = 0
    for cx, ch in enumerate(row.chars):
        cur_rx += TAB_STOP if ch == "\t" else 1
        if cur_rx > rx:
            return cx
    return row.size


def clamp_x(state: EditorState) -> None:
    """Keep x within the current row (a row past the end has size 0)."""
    row = state.current_row
    size = row.size if row is not None else 0
    if state.cursor.x > size:
        state.cursor.x = size


def move_cursor(state: EditorState, key: Key) -> None:
    """Move one step for an arrow key, wrapping LEFT/RIGHT across rows."""
    cursor = state.cursor
    doc = state.document
    row = state.current_row

    if key == Key.LEFT:
        if cursor.x > 0:
            cursor.x -= 1
        elif cursor.y > 0:
            cursor.y -= 1
            cursor.x = doc[cursor.y].size
    elif key == Key.RIGHT:
        if row is not None and cursor.x < row.size:
            cursor.x += 1
        elif row is not None and cursor.y < doc.num_rows - 1:
            cursor.y += 1
            cursor.x = 0
    elif key == Key.UP:
        if cursor.y > 0:
            cursor.y -= 1
    elif key == Key.DOWN:
        if cursor.y < doc.num_rows:
            cursor.y += 1

    clamp_x(state)


def page(state: EditorState, key: Key) -> None:
    """Move a screenful up or down."""
    height = state.viewport.height
    if key == Key.PAGE_UP:
        state.cursor.y = state.viewport.row_offset
        step = Key.UP
    else:
        state.cursor.y = max(0, min(state.viewport.row_offset + height - 1, state.document.num_rows))
        step = Key.DOWN
    for _ in range(height):
        move_cursor(state, step)
    clamp_x(state)


def home(state: EditorState) -> None:
    state.cursor.x = 0


def end(state: EditorState) -> None:
    row = state.current_row
    if row is not None:
        state.cursor.x = row.size


def scroll(state: EditorState) -> None:
    """
    Recompute rx and the smallest scroll that keeps the cursor visible.

    Called once per frame before drawing.
    """
    cursor = state.cursor
    view = state.viewport
    row = state.current_row
    cursor.rx = to_render_column(row, cursor.x) if row is not None else 0

    if cursor.y < view.row_offset:
        view.row_offset = cursor.y
    if view.height > 0 and cursor.y >= view.row_offset + view.height:
        view.row_offset = cursor.y - view.height + 1

    text_width = view.text_width(state.document.gutter_width)
    if cursor.rx < view.col_offset:
        view.col_offset = cursor.rx
    if text_width > 0 and cursor.rx >= view.col_offset + text_width:
        view.col_offset = cursor.rx - text_width + 1
