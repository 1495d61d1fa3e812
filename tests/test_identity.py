import threading

import pytest

from crickstats.ingest import IdentityRegistry, Span, parse_player, parse_span
from crickstats.models import Role


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Sachin Tendulkar (IND)", ("Sachin Tendulkar", "IND")),
        ("  KC Sangakkara (Asia/ICC/SL) ", ("KC Sangakkara", "Asia/ICC/SL")),
        ("JH Kallis(ICC/SA)", ("JH Kallis", "ICC/SA")),
        ("Unattached Player", ("Unattached Player", "Unknown")),
        ("Broken (Token", ("Broken (Token", "Unknown")),
    ],
)
def test_parse_player(raw, expected):
    assert parse_player(raw) == expected
    assert parse_player(raw) == parse_player(raw)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1989-2013", Span(1989, 2013)),
        ("2005-", Span(2005, None)),
        ("2005-present", Span(2005, None)),
        ("xx-2001", Span(None, 2001)),
        ("", Span(None, None)),
        (None, Span(None, None)),
        ("1999", Span(1999, None)),
    ],
)
def test_parse_span(raw, expected):
    assert parse_span(raw) == expected


def test_registry_assigns_dense_ids_in_first_seen_order():
    registry = IdentityRegistry()
    first = registry.resolve("A Batter (IND)", Role.BATSMAN)
    second = registry.resolve("B Bowler (AUS)", Role.BOWLER)
    again = registry.resolve("A Batter (IND)", Role.BOWLER)

    assert (first.id, second.id) == (1, 2)
    assert again is first
    assert [player.id for player in registry.players()] == [1, 2]
    assert len(registry) == 2


def test_registry_first_writer_wins_for_country_and_role():
    registry = IdentityRegistry()
    registry.resolve("Imran Khan (PAK)", Role.BATSMAN)
    later = registry.resolve("Imran Khan (ICC/PAK)", Role.WICKET_KEEPER)

    assert later.country == "PAK"
    assert later.primary_role == "batsman"


def test_registry_with_roles_does_not_mutate_existing_players():
    registry = IdentityRegistry()
    original = registry.resolve("A (IND)", Role.BATSMAN)

    updated = registry.with_roles({"A": Role.ALL_ROUNDER})

    assert updated[0].primary_role == "all-rounder"
    assert original.primary_role == "batsman"


def test_registry_allocation_is_safe_across_threads():
    registry = IdentityRegistry()
    names = [f"Player {i} (XI)" for i in range(50)]

    def worker():
        for name in names:
            registry.resolve(name, Role.BATSMAN)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = sorted(player.id for player in registry.players())
    assert ids == list(range(1, 51))
