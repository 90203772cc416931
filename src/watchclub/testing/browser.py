"""Scripted ``Dialogs`` and in-memory ``Downloads``."""

from collections.abc import Iterable

from watchclub.browser import SavedFile


class ScriptedDialogs:
    """Answers confirmations from a script and records every prompt.

    Once the script runs out, ``default`` answers.
    """

    def __init__(self, answers: Iterable[bool] = (), *, default: bool = True) -> None:
        self.answers = list(answers)
        self.default = default
        self.confirmations: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        if self.answers:
            return self.answers.pop(0)
        return self.default

    def alert(self, message: str) -> None:
        self.alerts.append(message)


class MemoryDownloads:
    """Keeps saved files by name."""

    def __init__(self) -> None:
        self.files: dict[str, SavedFile] = {}

    def save(self, file: SavedFile) -> str:
        self.files[file.filename] = file
        return f"memory://{file.filename}"
