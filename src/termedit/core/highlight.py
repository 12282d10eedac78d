"""Per-column highlight classification for rendered rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from termedit.core.constants import COLORS_8


class Highlight(IntEnum):
    """Highlight tags. The value is the SGR foreground code used to draw it."""
    NORMAL = COLORS_8["white"]
    NUMBER = COLORS_8["magenta"]
    COMMENT = COLORS_8["red"]
    STATEMENT = COLORS_8["yellow"]
    TYPE = COLORS_8["green"]


SEPARATORS = ",.()+-/*=~%[]{}<>;:&|!^\"'"


def is_separator(ch: str) -> bool:
    """Check whether a character ends a word for keyword matching."""
    return not ch or ch.isspace() or ch in SEPARATORS


@dataclass(frozen=True)
class RuleSet:
    """
    Syntax rules for one file type.

    Loaded from a JSON object of the form::

        {"comments": ["//"], "statements": ["if", "for"], "types": ["int"]}
    """
    comments: tuple[str, ...] = ()
    statements: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    name: str = field(default="", compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: str = "") -> RuleSet:
        """Build a RuleSet, ignoring unknown keys and non-string entries."""
        def words(key: str) -> tuple[str, ...]:
            values = data.get(key, [])
            if not isinstance(values, list):
                raise ValueError(f"'{key}' must be a list of strings")
            return tuple(v for v in values if isinstance(v, str) and v)

        return cls(
            comments=words("comments"),
            statements=words("statements"),
            types=words("types"),
            name=name,
        )


def _match_word(text: str, i: int, words: tuple[str, ...]) -> int:
    """Length of the keyword starting at i that is followed by a separator, or 0."""
    for word in words:
        end = i + len(word)
        if text.startswith(word, i) and is_separator(text[end] if end < len(text) else ""):
            return len(word)
    return 0


def classify(render: str, rules: RuleSet | None = None) -> list[Highlight]:
    """
    Tag every column of a rendered row.

    Digits not immediately preceded by a letter are numbers. With rules,
    comment markers tag the rest of the line and whole-word keywords are
    tagged as statements or types.
    """
    hl = [Highlight.NORMAL] * len(render)
    prev_sep = True
    i = 0
    while i < len(render):
        ch = render[i]

        if rules is not None:
            if any(render.startswith(marker, i) for marker in rules.comments):
                for j in range(i, len(render)):
                    hl[j] = Highlight.COMMENT
                break

            if prev_sep:
                length = _match_word(render, i, rules.statements)
                tag = Highlight.STATEMENT
                if not length:
                    length = _match_word(render, i, rules.types)
                    tag = Highlight.TYPE
                if length:
                    for j in range(i, i + length):
                        hl[j] = tag
                    i += length
                    prev_sep = False
                    continue

        if ch.isdigit() and not (i > 0 and render[i - 1].isalpha()):
            hl[i] = Highlight.NUMBER

        prev_sep = is_separator(ch)
        i += 1

    return hl
