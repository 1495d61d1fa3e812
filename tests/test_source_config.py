import pytest

from crickstats.config import DOMAIN_ORDER, Domain, format_from_label, get_sources, iter_sources
from crickstats.models import Format, Role


def test_format_from_label_handles_source_labels():
    assert format_from_label("ODI data", Domain.BATTING) == Format.ODI
    assert format_from_label("t20", Domain.BATTING) == Format.T20
    assert format_from_label("Bowling_test", Domain.BOWLING) == Format.TEST
    assert format_from_label("Fielding_ODI", "fielding") == Format.ODI


def test_format_from_label_rejects_unknown():
    with pytest.raises(ValueError):
        format_from_label("Bowling_Hundred", Domain.BOWLING)


def test_get_sources_case_insensitive():
    sources = get_sources("BOWLING")
    assert [source.format for source in sources] == [Format.ODI, Format.T20, Format.TEST]
    assert all(source.seed_role == Role.BOWLER for source in sources)


def test_get_sources_missing_raises():
    with pytest.raises(KeyError):
        get_sources("wicketkeeping")


def test_iter_sources_follows_domain_order():
    domains = [source.domain for source in iter_sources()]
    assert domains == [domain for domain in DOMAIN_ORDER for _ in range(3)]
    assert get_sources(Domain.FIELDING)[0].relative_path == "Fielding/Fielding_ODI.csv"
