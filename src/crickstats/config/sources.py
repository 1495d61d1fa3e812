"""Source file layout and column mappings for each statistics domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Dict, Iterable, Mapping, Tuple

from crickstats.models import Format, Role


class Domain(str, Enum):
    BATTING = "batting"
    BOWLING = "bowling"
    FIELDING = "fielding"


# Passes run in this order; changing it changes which domain seeds a new
# player's country and provisional role.
DOMAIN_ORDER: Tuple[Domain, ...] = (Domain.BATTING, Domain.BOWLING, Domain.FIELDING)


@dataclass(frozen=True)
class SourceSpec:
    domain: Domain
    label: str
    relative_path: str
    seed_role: Role
    columns: Mapping[str, str]

    @property
    def format(self) -> Format:
        return format_from_label(self.label, self.domain)


BATTING_COLUMNS: Mapping[str, str] = {
    "player": "Player",
    "span": "Span",
    "matches": "Mat",
    "innings": "Inns",
    "not_out": "NO",
    "runs": "Runs",
    "highest": "HS",
    "average": "Ave",
    "balls_faced": "BF",
    "strike_rate": "SR",
    "hundreds": "100",
    "fifties": "50",
    "fours": "4s",
    "sixes": "6s",
}

BOWLING_COLUMNS: Mapping[str, str] = {
    "player": "Player",
    "span": "Span",
    "matches": "Mat",
    "innings": "Inns",
    "wickets": "Wkts",
    "bowling_average": "Ave",
    "bowling_economy": "Econ",
    "bowling_strike_rate": "SR",
    "best_bowling": "BBI",
    "five_wickets": "5",
    "ten_wickets": "10",
}

FIELDING_COLUMNS: Mapping[str, str] = {
    "player": "Player",
    "matches": "Mat",
    "innings": "Inns",
    "catches": "Ct",
    "stumpings": "St",
}


def format_from_label(label: str, domain: Domain | str) -> Format:
    """Map a source label such as ``"ODI data"`` or ``"Bowling_T20"`` to a format."""

    text = label.strip().lower()
    prefix = f"{Domain(domain).value}_"
    if text.startswith(prefix):
        text = text[len(prefix):]
    if text.endswith(" data"):
        text = text[: -len(" data")]
    try:
        return Format(text.strip())
    except ValueError:
        raise ValueError(f"Source label {label!r} does not name a known format") from None


def _batting(label: str) -> SourceSpec:
    return SourceSpec(
        domain=Domain.BATTING,
        label=label,
        relative_path=str(PurePosixPath("Batting") / f"{label}.csv"),
        seed_role=Role.BATSMAN,
        columns=BATTING_COLUMNS,
    )


def _bowling(label: str) -> SourceSpec:
    return SourceSpec(
        domain=Domain.BOWLING,
        label=label,
        relative_path=str(PurePosixPath("Bowling") / f"{label}.csv"),
        seed_role=Role.BOWLER,
        columns=BOWLING_COLUMNS,
    )


def _fielding(label: str) -> SourceSpec:
    return SourceSpec(
        domain=Domain.FIELDING,
        label=label,
        relative_path=str(PurePosixPath("Fielding") / f"{label}.csv"),
        seed_role=Role.WICKET_KEEPER,
        columns=FIELDING_COLUMNS,
    )


_SOURCES: Dict[Domain, Tuple[SourceSpec, ...]] = {
    Domain.BATTING: (_batting("ODI data"), _batting("t20"), _batting("test")),
    Domain.BOWLING: (_bowling("Bowling_ODI"), _bowling("Bowling_t20"), _bowling("Bowling_test")),
    Domain.FIELDING: (_fielding("Fielding_ODI"), _fielding("Fielding_t20"), _fielding("Fielding_test")),
}


def get_sources(domain: Domain | str) -> Tuple[SourceSpec, ...]:
    """Fetch the ordered sources for a domain, raising KeyError if unknown."""

    try:
        key = domain if isinstance(domain, Domain) else Domain(domain.lower())
    except ValueError:
        raise KeyError(f"No sources configured for domain={domain!r}") from None
    return _SOURCES[key]


def iter_sources() -> Iterable[SourceSpec]:
    """Yield every configured source in pass order."""

    for domain in DOMAIN_ORDER:
        yield from _SOURCES[domain]
