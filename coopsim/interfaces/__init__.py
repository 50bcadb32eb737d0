"""Abstract interfaces for pluggable simulation collaborators"""

from .passenger_source import IPassengerSource, PassengerInfo, PassengerSourceExhausted
from .boarding_policy import IBoardingPolicy

__all__ = [
    'IPassengerSource',
    'PassengerInfo',
    'PassengerSourceExhausted',
    'IBoardingPolicy',
]
