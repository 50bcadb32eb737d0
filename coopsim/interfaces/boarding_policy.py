"""
Boarding Policy Interface

Decides when the car counts as "here" for a waiting rider and which
waiting riders it lets in.
"""

from abc import ABC, abstractmethod


class IBoardingPolicy(ABC):
    """
    Interface for boarding decisions

    Design Philosophy:
    - Pure decision functions (no scheduling, no state changes)
    - Pluggable (the classic algorithm and its directional variant)
    """

    name: str = "abstract"

    @abstractmethod
    def is_available(self, world, origin: int, destination: int) -> bool:
        """
        Is the car available to a rider going from origin to destination?

        Used on arrival (to skip the hall call and get on directly) and on
        give-up (a rider whose car is loading right here stays).
        """
        pass

    @abstractmethod
    def admits(self, world, passenger) -> bool:
        """Should the car take this waiting passenger at the current stop?"""
        pass
