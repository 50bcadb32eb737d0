"""
Passenger Source Interface

Defines where new riders come from: a seeded random stream, a fixed
fixture list replayed for regression runs, or a chain of both.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple


class PassengerInfo(NamedTuple):
    """Everything the arrival step needs to know about the next rider."""
    origin: int         # floor on which this rider enters
    destination: int    # this rider's destination floor
    patience: int       # ticks this rider will wait before giving up
    inter_arrival: int  # ticks before the next rider arrives


class PassengerSourceExhausted(Exception):
    """Raised by a source that has no more riders to hand out."""


class IPassengerSource(ABC):
    """
    Interface for passenger generation

    The simulation asks for exactly one rider per arrival step. A source
    must be deterministic for a fixed seed or fixture so that runs can be
    replayed tick for tick.
    """

    @abstractmethod
    def next_passenger(self) -> PassengerInfo:
        """
        Produce the next rider.

        Returns:
            PassengerInfo with origin != destination

        Raises:
            PassengerSourceExhausted: If the source has run out of data
        """
        pass
