"""Infrastructure: message passing and SimPy integration"""

from .message_broker import MessageBroker
from .simpy_driver import SimpyDriver

__all__ = [
    'MessageBroker',
    'SimpyDriver',
]
