"""Snapshot of the line editor as seen by the renderer.

The key loop fills these in; the renderer only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Sequence

Mode = Literal["insert", "command", "completion", "navigation", "history"]


@dataclass(frozen=True)
class Token:
    """A piece of the input line with the lexical type used to style it."""

    text: str
    type: str = "bareword"


@dataclass(frozen=True)
class CandidatePart:
    text: str
    completed: bool = False


@dataclass(frozen=True)
class Candidate:
    """A completion candidate.

    ``text`` is what the listing shows; ``parts`` is what gets spliced into
    the input line, with the parts added by completion marked ``completed``.
    """

    text: str
    parts: Sequence[CandidatePart] = ()


@dataclass(frozen=True)
class Completion:
    """Active completion: the byte span ``[start, end)`` being replaced."""

    type: str
    start: int
    end: int
    candidates: Sequence[Candidate]
    current: int = -1


@dataclass(frozen=True)
class HistoryState:
    """Active history search: walking *items* that begin with *prefix*."""

    prefix: str
    items: Sequence[str]
    current: int = 0


@dataclass(frozen=True)
class NavColumn:
    names: Sequence[str]
    selected: int = -1


@dataclass(frozen=True)
class Navigation:
    current: NavColumn
    parent: NavColumn


@dataclass(frozen=True)
class EditorState:
    """Everything the renderer reads.

    ``dot`` is a byte offset into ``line`` (UTF-8); ``tokens`` concatenated
    make up ``line``.
    """

    prompt: str = ""
    rprompt: str = ""
    mode: Mode = "insert"
    line: str = ""
    tokens: Sequence[Token] = ()
    dot: int = 0
    completion: Completion | None = None
    history: HistoryState | None = None
    navigation: Navigation | None = None
    tips: Sequence[str] = field(default_factory=tuple)
