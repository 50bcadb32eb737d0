"""
Passenger sources

- RandomPassengerSource: seeded random stream, uniform over floors and ranges
- FixturePassengerSource: replays a fixed list, then reports exhaustion
- FallbackPassengerSource: one source until it runs dry, then another
"""

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..interfaces.passenger_source import IPassengerSource, PassengerInfo, PassengerSourceExhausted


# Worked example from the textbook description of the algorithm:
# (origin, destination, patience, inter-arrival gap) for the first eleven users.
KNUTH_FIXTURE: List[PassengerInfo] = [
    PassengerInfo(0, 2, 152 - 0, 38 - 0),
    PassengerInfo(4, 1, 36000, 136 - 38),
    PassengerInfo(2, 1, 36000, 141 - 136),
    PassengerInfo(2, 1, 36000, 291 - 141),
    PassengerInfo(3, 1, 36000, 364 - 291),
    PassengerInfo(2, 1, 540 - 364, 602 - 364),
    PassengerInfo(1, 2, 36000, 827 - 602),
    PassengerInfo(1, 0, 36000, 876 - 827),
    PassengerInfo(1, 3, 36000, 1048 - 876),
    PassengerInfo(0, 4, 36000, 4384 - 1048),
    PassengerInfo(2, 3, 36000, 4845 - 4384),  # "User 17" in the book
]


class RandomPassengerSource(IPassengerSource):
    """
    Uniform random riders.

    Origin is uniform over all floors and the destination is the origin
    shifted by 1..n-1 floors (mod n), so the two never coincide. All
    ranges are inclusive.
    """

    def __init__(self, num_floors: int = 5, seed: Optional[int] = None,
                 patience_range: Tuple[int, int] = (300, 1200),
                 inter_arrival_range: Tuple[int, int] = (10, 900)):
        if num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        for name, (low, high) in (("patience_range", patience_range),
                                  ("inter_arrival_range", inter_arrival_range)):
            if low < 0 or high < low:
                raise ValueError(f"{name} must satisfy 0 <= low <= high, got {(low, high)}")
        self.num_floors = num_floors
        self.seed = seed
        self.patience_range = patience_range
        self.inter_arrival_range = inter_arrival_range
        self._rng = random.Random(seed)

    def _between(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def next_passenger(self) -> PassengerInfo:
        origin = self._between(0, self.num_floors - 1)
        destination = (origin + self._between(1, self.num_floors - 1)) % self.num_floors
        patience = self._between(*self.patience_range)
        inter_arrival = self._between(*self.inter_arrival_range)
        return PassengerInfo(origin, destination, patience, inter_arrival)


class FixturePassengerSource(IPassengerSource):
    """Replays a fixed sequence of riders, then raises PassengerSourceExhausted."""

    def __init__(self, records: Iterable[Sequence[int]]):
        self.records = [PassengerInfo(*record) for record in records]
        for record in self.records:
            if record.origin == record.destination:
                raise ValueError(f"Fixture rider {record} has origin == destination")
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self.records) - self._index

    def next_passenger(self) -> PassengerInfo:
        if self._index >= len(self.records):
            raise PassengerSourceExhausted(f"fixture exhausted after {len(self.records)} passengers")
        record = self.records[self._index]
        self._index += 1
        return record


class FallbackPassengerSource(IPassengerSource):
    """Uses ``primary`` until it is exhausted, then ``fallback`` for good."""

    def __init__(self, primary: IPassengerSource, fallback: IPassengerSource):
        self.primary = primary
        self.fallback = fallback
        self.switched = False

    def next_passenger(self) -> PassengerInfo:
        if not self.switched:
            try:
                return self.primary.next_passenger()
            except PassengerSourceExhausted:
                self.switched = True
        return self.fallback.next_passenger()


def get_passenger_source(name: str, num_floors: int = 5, seed: Optional[int] = None,
                         patience_range: Tuple[int, int] = (300, 1200),
                         inter_arrival_range: Tuple[int, int] = (10, 900)) -> IPassengerSource:
    """
    Build a passenger source by name.

    Available: ``random``, ``knuth`` (fixture only) and
    ``knuth_then_random`` (fixture, then the random stream).
    """
    def random_source():
        return RandomPassengerSource(num_floors, seed, patience_range, inter_arrival_range)

    key = name.lower()
    if key == "random":
        return random_source()
    if key == "knuth":
        return FixturePassengerSource(KNUTH_FIXTURE)
    if key == "knuth_then_random":
        return FallbackPassengerSource(FixturePassengerSource(KNUTH_FIXTURE), random_source())
    raise ValueError(f"Unknown passenger source '{name}'. Available: random, knuth, knuth_then_random")
