"""Identity resolution for raw ``"Name (Country)"`` tokens and span parsing."""

from __future__ import annotations

import logging
import re
import threading
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from crickstats.models import Player, Role


logger = logging.getLogger(__name__)

UNKNOWN_COUNTRY = "Unknown"

_PLAYER_PATTERN = re.compile(r"^(.+?)\s*\(([^)]+)\)$")
_LEADING_INT = re.compile(r"^\s*[-+]?\d+")


def parse_player(raw: str) -> Tuple[str, str]:
    """Split ``"Sachin Tendulkar (IND)"`` into ``("Sachin Tendulkar", "IND")``.

    Tokens without a trailing parenthesized suffix keep the whole trimmed
    string as the name and report the country as ``"Unknown"``.
    """

    text = (raw or "").strip()
    match = _PLAYER_PATTERN.match(text)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return text, UNKNOWN_COUNTRY


class Span(NamedTuple):
    start: Optional[int]
    end: Optional[int]


def _span_bound(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(0))


def parse_span(raw: Optional[str]) -> Span:
    """Parse ``"1989-2013"`` into integer bounds; each side fails independently."""

    if not raw or not raw.strip():
        return Span(None, None)
    start_text, _, end_text = raw.partition("-")
    return Span(_span_bound(start_text), _span_bound(end_text))


def seed_player(player_id: int, name: str, country: str, role: Role) -> Player:
    """Create the Player for a name seen for the first time.

    The first row that mentions a name fixes its country and provisional
    role; later rows for the same name never change them. Because domains
    are merged batting, then bowling, then fielding, the batting tables win
    whenever a name appears in more than one of them with different country
    tokens. The provisional role is replaced by the role classifier.
    """

    return Player(id=player_id, name=name, country=country, primary_role=role)


class IdentityRegistry:
    """Assigns one dense, stable id per distinct resolved name."""

    def __init__(self) -> None:
        self._players: Dict[str, Player] = {}
        self._lock = threading.Lock()

    def resolve(self, raw: str, seed_role: Role) -> Player:
        name, country = parse_player(raw)
        existing = self._players.get(name)
        if existing is not None:
            if existing.country != country:
                logger.debug(
                    "Keeping country %s for %s (row reported %s)", existing.country, name, country
                )
            return existing
        with self._lock:
            existing = self._players.get(name)
            if existing is not None:
                return existing
            player = seed_player(len(self._players) + 1, name, country, seed_role)
            self._players[name] = player
            return player

    def get(self, name: str) -> Optional[Player]:
        return self._players.get(name)

    def __len__(self) -> int:
        return len(self._players)

    def players(self) -> List[Player]:
        """Players in id order, which is first-seen order."""

        return sorted(self._players.values(), key=lambda player: player.id)

    def with_roles(self, roles: Mapping[str, Role]) -> List[Player]:
        """Return players with their role replaced from ``roles`` where present."""

        updated: List[Player] = []
        for player in self.players():
            role = roles.get(player.name)
            if role is None:
                updated.append(player)
            else:
                updated.append(player.model_copy(update={"primary_role": Role(role).value}))
        return updated
