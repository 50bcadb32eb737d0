"""Passenger source tests"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from coopsim.implementations.traffic import (
    KNUTH_FIXTURE,
    FallbackPassengerSource,
    FixturePassengerSource,
    RandomPassengerSource,
    get_passenger_source,
)
from coopsim.interfaces.passenger_source import PassengerInfo, PassengerSourceExhausted


def test_random_source_stays_in_range():
    source = RandomPassengerSource(num_floors=5, seed=12)
    for _ in range(2000):
        info = source.next_passenger()
        assert 0 <= info.origin < 5
        assert 0 <= info.destination < 5
        assert info.origin != info.destination
        assert 300 <= info.patience <= 1200
        assert 10 <= info.inter_arrival <= 900


def test_random_source_covers_every_trip():
    source = RandomPassengerSource(num_floors=5, seed=3)
    trips = {(info.origin, info.destination) for info in (source.next_passenger() for _ in range(3000))}

    assert len(trips) == 20


def test_random_source_is_seeded():
    first = RandomPassengerSource(seed=99)
    second = RandomPassengerSource(seed=99)

    assert [first.next_passenger() for _ in range(50)] == [second.next_passenger() for _ in range(50)]


def test_random_source_honours_degenerate_ranges():
    source = RandomPassengerSource(num_floors=2, seed=0, patience_range=(500, 500),
                                   inter_arrival_range=(0, 0))
    info = source.next_passenger()

    assert info.patience == 500
    assert info.inter_arrival == 0
    assert {info.origin, info.destination} == {0, 1}


def test_random_source_rejects_bad_ranges():
    with pytest.raises(ValueError):
        RandomPassengerSource(num_floors=1)
    with pytest.raises(ValueError):
        RandomPassengerSource(patience_range=(10, 5))


def test_fixture_source_replays_then_raises():
    source = FixturePassengerSource([(0, 1, 10, 20), (3, 2, 30, 40)])

    assert source.next_passenger() == PassengerInfo(0, 1, 10, 20)
    assert source.remaining == 1
    assert source.next_passenger() == PassengerInfo(3, 2, 30, 40)
    with pytest.raises(PassengerSourceExhausted):
        source.next_passenger()


def test_fixture_source_rejects_stationary_rider():
    with pytest.raises(ValueError):
        FixturePassengerSource([(2, 2, 10, 10)])


def test_knuth_fixture_arrival_times():
    times = [0]
    for info in KNUTH_FIXTURE[:-1]:
        times.append(times[-1] + info.inter_arrival)

    assert times == [0, 38, 136, 141, 291, 364, 602, 827, 876, 1048, 4384]
    assert KNUTH_FIXTURE[0].patience == 152


def test_fallback_switches_once():
    source = FallbackPassengerSource(FixturePassengerSource([(0, 4, 1, 1)]),
                                     FixturePassengerSource([(4, 0, 2, 2), (1, 0, 3, 3)]))

    assert source.next_passenger().origin == 0
    assert not source.switched
    assert source.next_passenger().origin == 4
    assert source.switched
    assert source.next_passenger().origin == 1
    with pytest.raises(PassengerSourceExhausted):
        source.next_passenger()


def test_registry():
    assert isinstance(get_passenger_source("random", seed=1), RandomPassengerSource)
    assert isinstance(get_passenger_source("knuth"), FixturePassengerSource)
    assert isinstance(get_passenger_source("KNUTH_THEN_RANDOM"), FallbackPassengerSource)
    with pytest.raises(ValueError):
        get_passenger_source("poisson")
