"""Style tables for the renderer.

A style is the parameter string of an SGR sequence (the ``1;32`` in
``ESC[1;32m``); the empty string means no styling.  Tables are plain objects
handed to the composer, so tests can inject their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_token_styles() -> dict[str, str]:
    return {
        "bareword": "",
        "single-quoted": "33",
        "double-quoted": "33",
        "variable": "35",
        "wildcard": "36",
        "tilde": "36",
        "comment": "34",
        "error": "31;3",
        "command": "32",
        "sep": "",
    }


@dataclass
class Styles:
    """SGR styles for every region the composer draws."""

    prompt: str = ""
    rprompt: str = "7"
    mode: str = "1;37;45"
    tip: str = ""
    # Appended to the token style of completed parts, hence the leading ";".
    completed: str = ";4"
    completed_history: str = "4"
    current_completion: str = "7"
    selected_file: str = "7"
    tokens: dict[str, str] = field(default_factory=_default_token_styles)

    def for_token(self, token_type: str) -> str:
        return self.tokens.get(token_type, "")

    @classmethod
    def plain(cls) -> Styles:
        """A table with every style empty."""
        return cls(
            prompt="",
            rprompt="",
            mode="",
            tip="",
            completed="",
            completed_history="",
            current_completion="",
            selected_file="",
            tokens={},
        )
