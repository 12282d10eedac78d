"""Substring search over rendered rows, with repeat in either direction."""

from __future__ import annotations

import logging

from termedit.cli.editor.cursor import to_buffer_column
from termedit.cli.editor.state import EditorState
from termedit.core.constants import COLORS_8

logger = logging.getLogger(__name__)

NOT_FOUND = "Pattern not found: {query}"
HIT_BOTTOM = "Hit bottom, starting from the top"
HIT_TOP = "Hit top, starting from the bottom"


class SearchEngine:
    """
    Finds text in the document's render form.

    Matches are recorded as an anchor (row, render column) in
    ``state.search``; ``next``/``prev`` continue from the anchor and wrap
    around the document once, leaving a notice in the message bar.
    """

    def __init__(self, state: EditorState) -> None:
        self.state = state

    def _jump(self, row: int, col: int) -> None:
        doc = self.state.document
        self.state.search.anchor_row = row
        self.state.search.anchor_col = col
        self.state.cursor.y = row
        self.state.cursor.x = to_buffer_column(doc[row], col)

    def search(self, query: str) -> bool:
        """Find the first occurrence of query from the top of the document."""
        if not query:
            return False
        for i, row in enumerate(self.state.document):
            col = row.render.find(query)
            if col != -1:
                self.state.search.query = query
                self._jump(i, col)
                return True
        self.state.message.warn(NOT_FOUND.format(query=query))
        logger.debug("Search for %r found nothing", query)
        return False

    def next(self) -> bool:
        """Jump to the next match after the anchor, wrapping to the top once."""
        search = self.state.search
        doc = self.state.document
        if not search.active or doc.num_rows == 0:
            return False

        if search.anchor_row < doc.num_rows:
            col = doc[search.anchor_row].render.find(search.query, search.anchor_col + 1)
            if col != -1:
                self._jump(search.anchor_row, col)
                return True

        for i in range(search.anchor_row + 1, doc.num_rows):
            col = doc[i].render.find(search.query)
            if col != -1:
                self._jump(i, col)
                return True

        self.state.message.set(HIT_BOTTOM, fg=COLORS_8["red"])
        for i in range(doc.num_rows):
            col = doc[i].render.find(search.query)
            if col != -1:
                self._jump(i, col)
                return True

        self.state.message.warn(NOT_FOUND.format(query=search.query))
        return False

    def prev(self) -> bool:
        """Jump to the previous match before the anchor, wrapping to the bottom once."""
        search = self.state.search
        doc = self.state.document
        if not search.active or doc.num_rows == 0:
            return False

        if search.anchor_row < doc.num_rows and search.anchor_col > 0:
            render = doc[search.anchor_row].render
            # Any match starting strictly before the anchor column
            col = render.rfind(search.query, 0, search.anchor_col - 1 + len(search.query))
            if col != -1:
                self._jump(search.anchor_row, col)
                return True

        for i in range(min(search.anchor_row, doc.num_rows) - 1, -1, -1):
            col = doc[i].render.rfind(search.query)
            if col != -1:
                self._jump(i, col)
                return True

        self.state.message.set(HIT_TOP, fg=COLORS_8["red"])
        for i in range(doc.num_rows - 1, -1, -1):
            col = doc[i].render.rfind(search.query)
            if col != -1:
                self._jump(i, col)
                return True

        self.state.message.warn(NOT_FOUND.format(query=search.query))
        return False
