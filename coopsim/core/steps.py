from enum import IntEnum


class ElevatorStep(IntEnum):
    """Resumption labels of the elevator and its two helper timers."""

    IDLE = 1
    REASSESS = 2
    OPEN_DOORS = 3
    LOAD_UNLOAD = 4
    CLOSE_DOORS = 5  # door-close timer
    PREPARE_TO_MOVE = 6
    ASCEND_STEP = 7
    DESCEND_STEP = 8
    INACTIVITY = 9  # inactivity timer
    ASCEND_ARRIVED = 71
    DESCEND_ARRIVED = 81


class PassengerStep(IntEnum):
    """Resumption labels of a passenger."""

    ARRIVE = 1
    GIVE_UP = 4
    BOARD = 5
    ALIGHT = 6
