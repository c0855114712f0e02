"""Entry point for termline-demo: render one frame of the line editor."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Sequence

from termline.settings import RenderSettings, SettingsError
from termline.state import (
    Candidate,
    CandidatePart,
    Completion,
    EditorState,
    HistoryState,
    NavColumn,
    Navigation,
    Token,
)
from termline.terminal import FileTerminal
from termline.writer import Writer

logger = logging.getLogger(__name__)


def tokenize(line: str) -> list[Token]:
    """Split *line* into words and separators; the first word is the command."""
    tokens: list[Token] = []
    seen_word = False
    for piece in re.split(r"(\s+)", line):
        if not piece:
            continue
        if piece.isspace():
            tokens.append(Token(piece, "sep"))
        elif piece.startswith("$"):
            tokens.append(Token(piece, "variable"))
        else:
            tokens.append(Token(piece, "bareword" if seen_word else "command"))
        seen_word = seen_word or not piece.isspace()
    return tokens


def build_completion(line: str, candidates: Sequence[str], current: int) -> Completion:
    """Complete the last word of *line* with *candidates*."""
    word = re.split(r"\s", line)[-1]
    end = len(line.encode("utf-8"))
    start = end - len(word.encode("utf-8"))
    cands = []
    for text in candidates:
        if text.startswith(word):
            parts = (CandidatePart(word), CandidatePart(text[len(word):], completed=True))
        else:
            parts = (CandidatePart(text, completed=True),)
        cands.append(Candidate(text, parts))
    return Completion("bareword", start, end, cands, current)


def build_state(args: argparse.Namespace) -> EditorState:
    line = args.line
    dot = args.dot if args.dot is not None else len(line.encode("utf-8"))
    mode = args.mode

    completion = None
    if args.candidates:
        completion = build_completion(line, args.candidates, args.current)
        mode = mode or "completion"

    history = None
    if args.history:
        history = HistoryState(line, args.history, args.current)
        mode = mode or "history"

    navigation = None
    if args.files or args.parent_files:
        navigation = Navigation(
            current=NavColumn(args.files, args.current),
            parent=NavColumn(args.parent_files, args.parent_selected),
        )
        mode = mode or "navigation"

    return EditorState(
        prompt=args.prompt,
        rprompt=args.rprompt,
        mode=mode or "insert",
        line=line,
        tokens=tokenize(line),
        dot=dot,
        completion=completion,
        history=history,
        navigation=navigation,
        tips=args.tip,
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termline-demo",
        description="Render one frame of the line editor to the terminal",
    )
    parser.add_argument("line", nargs="?", default="", help="Text of the input line")
    parser.add_argument("--prompt", default="> ", help="Prompt (default: '> ')")
    parser.add_argument("--rprompt", default="", help="Right prompt")
    parser.add_argument("--dot", type=int, default=None, help="Cursor byte offset (default: end of line)")
    parser.add_argument(
        "--mode",
        default=None,
        choices=["insert", "command", "completion", "navigation", "history"],
    )
    parser.add_argument("--candidates", nargs="*", default=[], help="Complete the last word with these")
    parser.add_argument("--history", nargs="*", default=[], help="History items matching the line")
    parser.add_argument("--files", nargs="*", default=[], help="Entries of the current directory")
    parser.add_argument("--parent-files", nargs="*", default=[], help="Entries of the parent directory")
    parser.add_argument("--parent-selected", type=int, default=-1)
    parser.add_argument("--current", type=int, default=0, help="Selected candidate, history item or file")
    parser.add_argument("--tip", action="append", default=[], help="Tip to show (repeatable)")
    parser.add_argument("--settings", default=None, help="JSON settings file")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.settings:
            settings = RenderSettings.load(args.settings)
        else:
            settings = RenderSettings.from_env()
    except SettingsError as e:
        print(f"termline-demo: {e}", file=sys.stderr)
        return 1

    terminal = FileTerminal(
        sys.stdout, default_size=(settings.default_columns, settings.default_rows)
    )
    writer = Writer(terminal, settings)
    try:
        state = build_state(args)
        logger.debug("Editor state: %s", state)
        writer.refresh(state)
        # Leave the cursor below the frame so the shell prompt does not
        # overwrite it.
        buf = writer.old_buf
        terminal.write("\n" * (len(buf) - buf.dot.line))
    except OSError as e:
        print(f"termline-demo: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
