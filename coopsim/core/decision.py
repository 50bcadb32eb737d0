from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .steps import ElevatorStep
from .world import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .simulation import ElevatorSimulation


def decide(sim: "ElevatorSimulation", now: int, triggered_by_arrival: bool) -> None:
    """
    Pick a direction for a car that has none, and wake it if it is dormant.

    ``triggered_by_arrival`` is true when called from the prepare-to-move
    step after a stop. In that case the home floor is the fallback target
    when no other floor has a call, which is what sends the car home.

    The scan always starts at floor 0, so lower floors win ties.
    """
    world = sim.world
    elevator = sim.elevator
    timing = sim.timing

    if world.direction is not Direction.NEUTRAL:
        return

    dormant = elevator.label == ElevatorStep.IDLE
    home = world.home_floor
    if dormant and world.has_call(home):
        sim.scheduler.schedule(elevator, ElevatorStep.OPEN_DOORS, now + timing.door_open_from_decision)
        return

    target = _first_call(world, default=home if triggered_by_arrival else None)
    if target is None:
        return

    if target < world.floor:
        world.direction = Direction.DOWN
    elif target > world.floor:
        world.direction = Direction.UP
    else:
        world.direction = Direction.NEUTRAL

    if dormant and target != home:
        sim.scheduler.schedule(elevator, ElevatorStep.PREPARE_TO_MOVE, now + timing.homing_delay)


def _first_call(world, default: Optional[int]) -> Optional[int]:
    for j in range(world.num_floors):
        if j != world.floor and world.has_call(j):
            return j
    return default
