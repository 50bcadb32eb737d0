"""Concrete passenger sources and boarding policies"""

from .traffic import (
    KNUTH_FIXTURE,
    RandomPassengerSource,
    FixturePassengerSource,
    FallbackPassengerSource,
    get_passenger_source,
)
from .boarding import (
    UnconditionalBoardingPolicy,
    DirectionalBoardingPolicy,
    get_boarding_policy,
)

__all__ = [
    'KNUTH_FIXTURE',
    'RandomPassengerSource',
    'FixturePassengerSource',
    'FallbackPassengerSource',
    'get_passenger_source',
    'UnconditionalBoardingPolicy',
    'DirectionalBoardingPolicy',
    'get_boarding_policy',
]
