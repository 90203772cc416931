"""Persistent client cache: who am I, and which clubs am I in.

The cache is an optimization, never the source of truth. It lets a page
shell show the signed-in user and a "your clubs" list before any round
trip; every screen that needs correct data re-fetches from the backend and
reconciles the cache with the answer.

Persisted layout (string keys in a ``KeyValueStore``)::

    watchclub_user   {"id": ..., "name": ..., "email": ...}
    watchclub_clubs  [{"id": ..., "name": ..., "startDate": ..., ...}, ...]

Reads fail soft: a missing or malformed value is "no data".
"""

import json
import logging
from collections.abc import Iterable

from watchclub.models import Club, ClubSummary, Identity
from watchclub.storage import KeyValueStore

logger = logging.getLogger("watchclub.cache")

IDENTITY_KEY = "watchclub_user"
CLUBS_KEY = "watchclub_clubs"


class PersistentCache:
    """Identity and club-summary cache over a ``KeyValueStore``.

    Club summaries are kept most-recently-touched first. ``club_limit``
    bounds the list (oldest entries fall off the tail); ``None`` keeps
    every club ever seen.
    """

    __slots__ = ("_identity", "_loaded", "club_limit", "store")

    def __init__(self, store: KeyValueStore, *, club_limit: int | None = None) -> None:
        self.store = store
        self.club_limit = club_limit
        self._identity: Identity | None = None
        self._loaded = False

    # -- Identity --

    @property
    def identity(self) -> Identity | None:
        """The current identity, loading it from storage on first access."""
        if not self._loaded:
            self.load_identity()
        return self._identity

    def load_identity(self) -> Identity | None:
        """Read the persisted identity. Missing or malformed data yields ``None``."""
        self._loaded = True
        self._identity = None
        raw = self.store.get_item(IDENTITY_KEY)
        if not raw:
            return None
        try:
            self._identity = Identity.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError) as exc:
            logger.debug("Ignoring malformed persisted identity: %s", exc)
        return self._identity

    def save_identity(self, identity: Identity) -> None:
        """Persist *identity*; from now on a user is signed in."""
        self.store.set_item(IDENTITY_KEY, json.dumps(identity.to_dict()))
        self._identity = identity
        self._loaded = True
        logger.info("Signed in as %s (%s)", identity.name, identity.id)

    def clear_identity(self) -> None:
        """Forget the identity and every cached club. Idempotent."""
        self.store.remove_item(IDENTITY_KEY)
        self.store.remove_item(CLUBS_KEY)
        self._identity = None
        self._loaded = True

    # -- Club summaries --

    def club_summaries(self) -> list[ClubSummary]:
        """Cached clubs, most recently touched first. Malformed data yields ``[]``."""
        raw = self.store.get_item(CLUBS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                msg = "club list must be an array"
                raise TypeError(msg)
            return [ClubSummary.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError) as exc:
            logger.debug("Ignoring malformed cached clubs: %s", exc)
            return []

    def get_club_summary(self, club_id: str) -> ClubSummary | None:
        for summary in self.club_summaries():
            if summary.id == club_id:
                return summary
        return None

    def upsert_club_summary(self, club: Club | ClubSummary) -> ClubSummary:
        """Move *club* to the front of the cached list, replacing any older copy."""
        summary = club if isinstance(club, ClubSummary) else ClubSummary.from_club(club)
        clubs = [c for c in self.club_summaries() if c.id != summary.id]
        clubs.insert(0, summary)
        self._write_clubs(clubs)
        return summary

    def remove_club_summary(self, club_id: str) -> None:
        clubs = self.club_summaries()
        remaining = [c for c in clubs if c.id != club_id]
        if len(remaining) != len(clubs):
            self._write_clubs(remaining)

    def replace_club_summaries(self, clubs: Iterable[Club | ClubSummary]) -> list[ClubSummary]:
        """Reconcile the cache with the backend's club list (backend order wins)."""
        summaries: list[ClubSummary] = []
        seen: set[str] = set()
        for club in clubs:
            if club.id in seen:
                continue
            seen.add(club.id)
            summaries.append(club if isinstance(club, ClubSummary) else ClubSummary.from_club(club))
        self._write_clubs(summaries)
        return self.club_summaries()

    def _write_clubs(self, clubs: list[ClubSummary]) -> None:
        if self.club_limit is not None:
            clubs = clubs[: self.club_limit]
        self.store.set_item(CLUBS_KEY, json.dumps([c.to_dict() for c in clubs]))
