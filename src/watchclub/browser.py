"""Host services the client needs from its surroundings.

- ``Dialogs``: blocking confirm/alert prompts. Destructive actions ask for
  confirmation first and report failures through ``alert``.
- ``Downloads``: saving a generated file (the schedule calendar).

Console and filesystem implementations ship here; ``watchclub.testing``
provides scripted doubles.
"""

import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger("watchclub.browser")

CALENDAR_MEDIA_TYPE = "text/calendar"


@runtime_checkable
class Dialogs(Protocol):
    """Synchronous user prompts. Nothing else runs while one is open."""

    def confirm(self, message: str) -> bool: ...

    def alert(self, message: str) -> None: ...


@dataclass(frozen=True, slots=True)
class SavedFile:
    """A file handed to ``Downloads.save``."""

    filename: str
    content: str
    media_type: str = "application/octet-stream"


@runtime_checkable
class Downloads(Protocol):
    """Somewhere to put generated files."""

    def save(self, file: SavedFile) -> str: ...


def slugify(text: str, *, fallback: str = "watchclub") -> str:
    """Lowercase, ASCII-ish, dash-separated file-name stem."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or fallback


def calendar_file(club_name: str, ics_data: str) -> SavedFile:
    """Wrap a GetClubCalendar response as a downloadable ``.ics`` file."""
    return SavedFile(
        filename=f"{slugify(club_name)}-schedule.ics",
        content=ics_data,
        media_type=CALENDAR_MEDIA_TYPE,
    )


class ConsoleDialogs:
    """``Dialogs`` over stdin/stderr."""

    __slots__ = ()

    def confirm(self, message: str) -> bool:
        try:
            answer = input(f"{message} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")

    def alert(self, message: str) -> None:
        print(message, file=sys.stderr)


class FileDownloads:
    """``Downloads`` that writes into a directory. Existing files are replaced."""

    __slots__ = ("directory",)

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory).expanduser()

    def save(self, file: SavedFile) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / Path(file.filename).name
        path.write_text(file.content, encoding="utf-8", newline="")
        logger.info("Saved %s (%s, %d bytes)", path, file.media_type, len(file.content))
        return str(path)
