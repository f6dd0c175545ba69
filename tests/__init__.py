from __future__ import annotations

from typing import Iterable, List


class ScriptedConsole:
    """Feeds canned answers to ``input`` and records everything printed."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
