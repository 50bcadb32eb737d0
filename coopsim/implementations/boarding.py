"""
Boarding policies

- UnconditionalBoardingPolicy: the classic algorithm; the car takes anyone
- DirectionalBoardingPolicy: only riders heading the way the car is going
"""

from typing import Dict, Type

from ..core.world import Direction
from ..interfaces.boarding_policy import IBoardingPolicy


class UnconditionalBoardingPolicy(IBoardingPolicy):
    """The car is available whenever it is on the rider's floor."""

    name = "unconditional"

    def is_available(self, world, origin: int, destination: int) -> bool:
        return world.floor == origin

    def admits(self, world, passenger) -> bool:
        return True


class DirectionalBoardingPolicy(IBoardingPolicy):
    """
    The car only serves riders travelling in its own sense.

    It is available on the rider's floor unless it is committed to the
    opposite direction, and at a stop it admits everyone while it has no
    direction, otherwise only riders whose destination lies ahead.
    """

    name = "directional"

    def is_available(self, world, origin: int, destination: int) -> bool:
        avoid = Direction.UP if destination < origin else Direction.DOWN
        return world.floor == origin and world.direction is not avoid

    def admits(self, world, passenger) -> bool:
        if world.direction is Direction.NEUTRAL:
            return True
        return (passenger.destination > world.floor) == (world.direction is Direction.UP)


BOARDING_POLICY_REGISTRY: Dict[str, Type[IBoardingPolicy]] = {
    UnconditionalBoardingPolicy.name: UnconditionalBoardingPolicy,
    DirectionalBoardingPolicy.name: DirectionalBoardingPolicy,
}


def get_boarding_policy(name: str) -> IBoardingPolicy:
    cls = BOARDING_POLICY_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown boarding policy '{name}'. Available: {', '.join(BOARDING_POLICY_REGISTRY)}")
    return cls()
