from __future__ import annotations

from typing import TYPE_CHECKING

from .decision import decide
from .errors import require
from .steps import ElevatorStep
from .task import Task

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .simulation import ElevatorSimulation


class DoorCloseTimer(Task):
    """Closes the doors once nobody is getting in or out, then sends the car on."""
    prefix = "E"

    def __init__(self, name: str = "DoorCloseTimer"):
        super().__init__(name, label=ElevatorStep.CLOSE_DOORS)

    def resume(self, sim: "ElevatorSimulation"):
        require(self.label == ElevatorStep.CLOSE_DOORS, f"{self.name} woke at step {self.label}")
        now = self.wake_time
        world = sim.world
        if world.loading:
            # Door flutter: somebody is still passing through.
            sim.scheduler.schedule(self, ElevatorStep.CLOSE_DOORS, now + sim.timing.flutter_delay)
            return
        world.idle_open = False
        sim.scheduler.schedule(sim.elevator, ElevatorStep.PREPARE_TO_MOVE, now + sim.timing.door_close)


class InactivityTimer(Task):
    """Clears the recently-active flag and gives the decision procedure another look."""
    prefix = "E"

    def __init__(self, name: str = "InactivityTimer"):
        super().__init__(name, label=ElevatorStep.INACTIVITY)

    def resume(self, sim: "ElevatorSimulation"):
        require(self.label == ElevatorStep.INACTIVITY, f"{self.name} woke at step {self.label}")
        sim.world.recently_active = False
        decide(sim, self.wake_time, triggered_by_arrival=False)
