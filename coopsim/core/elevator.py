from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from .decision import decide
from .errors import ContractViolation, require
from .steps import ElevatorStep, PassengerStep
from .task import Task
from .world import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .simulation import ElevatorSimulation


class ElevatorTask(Task):
    """
    The car controller.

    Each label has its own handler; ``resume`` looks the handler up in a
    table. The elevator is never retired: when it has nothing to do it
    parks at the home floor in IDLE and waits for the decision procedure
    or an arriving passenger to reschedule it.
    """
    prefix = "E"

    def __init__(self, name: str = "Elevator"):
        super().__init__(name, label=ElevatorStep.IDLE)
        self._handlers: Dict[int, Callable[["ElevatorSimulation", int], None]] = {
            ElevatorStep.IDLE: self._wait_for_call,
            ElevatorStep.REASSESS: self._reassess,
            ElevatorStep.OPEN_DOORS: self._open_doors,
            ElevatorStep.LOAD_UNLOAD: self._load_unload,
            ElevatorStep.PREPARE_TO_MOVE: self._prepare_to_move,
            ElevatorStep.ASCEND_STEP: self._ascend,
            ElevatorStep.ASCEND_ARRIVED: self._ascend_arrived,
            ElevatorStep.DESCEND_STEP: self._descend,
            ElevatorStep.DESCEND_ARRIVED: self._descend_arrived,
        }

    @property
    def is_dormant(self) -> bool:
        return self.label == ElevatorStep.IDLE

    def resume(self, sim: "ElevatorSimulation"):
        handler = self._handlers.get(self.label)
        if handler is None:
            raise ContractViolation(f"{self.name} has no step {self.label}")
        handler(sim, self.wake_time)

    # --- Steps ---

    def _wait_for_call(self, sim: "ElevatorSimulation", now: int):
        require(sim.world.floor == sim.world.home_floor,
                f"{self.name} dormant on floor {sim.world.floor}")

    def _reassess(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        demand = world.demand()
        if world.direction is Direction.UP and not demand.up:
            world.direction = Direction.DOWN if demand.passenger_wants_down else Direction.NEUTRAL
        elif world.direction is Direction.DOWN and not demand.down:
            world.direction = Direction.UP if demand.passenger_wants_up else Direction.NEUTRAL
        self._open_doors(sim, now)

    def _open_doors(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        timing = sim.timing
        world.loading = True
        world.recently_active = True
        sim.scheduler.schedule(sim.inactivity_timer, ElevatorStep.INACTIVITY, now + timing.inactivity_window)
        sim.scheduler.schedule(sim.door_timer, ElevatorStep.CLOSE_DOORS, now + timing.door_close_delay)
        sim.scheduler.schedule(self, ElevatorStep.LOAD_UNLOAD, now + timing.door_open)
        for passenger in world.car_occupants:
            passenger.stopped_at.append(world.floor)
        sim.publish("elevator/doors_opened", {
            "timestamp": now,
            "floor": world.floor,
            "direction": world.direction.name,
            "occupants": len(world.car_occupants),
        })

    def _load_unload(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        require(world.loading, f"{self.name} loading with doors not in use")
        leaver = next((p for p in world.car_occupants if p.destination == world.floor), None)
        if leaver is not None:
            sim.scheduler.schedule_immediate(leaver, PassengerStep.ALIGHT, now)
            sim.scheduler.schedule(self, ElevatorStep.LOAD_UNLOAD, now + sim.timing.leaving)
            return
        enterer = next((p for p in world.hall_queues[world.floor] if sim.policy.admits(world, p)), None)
        if enterer is not None:
            require(enterer.label == PassengerStep.GIVE_UP, f"{enterer.name} queued at step {enterer.label}")
            sim.scheduler.schedule_immediate(enterer, PassengerStep.BOARD, now)
            sim.scheduler.schedule(self, ElevatorStep.LOAD_UNLOAD, now + sim.timing.entering)
            return
        world.loading = False
        world.idle_open = True

    def _prepare_to_move(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        require(not world.loading, f"{self.name} cannot move with doors loading")
        world.call_car[world.floor] = False
        if world.direction is not Direction.DOWN:
            world.call_up[world.floor] = False
        if world.direction is not Direction.UP:
            world.call_down[world.floor] = False
        decide(sim, now, triggered_by_arrival=True)

        if world.direction is Direction.NEUTRAL:
            require(world.floor == world.home_floor,
                    f"{self.name} parking on floor {world.floor}")
            require(self not in sim.scheduler, f"{self.name} parking with a pending step")
            sim.scheduler.schedule_immediate(self, ElevatorStep.IDLE, now)
            return

        if world.recently_active:
            sim.scheduler.cancel(sim.inactivity_timer)
        if world.direction is Direction.UP:
            sim.scheduler.schedule(self, ElevatorStep.ASCEND_STEP, now + sim.timing.up_acceleration)
        else:
            sim.scheduler.schedule(self, ElevatorStep.DESCEND_STEP, now + sim.timing.down_acceleration)

    def _ascend(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        require(not world.loading, f"{self.name} cannot move with doors loading")
        require(world.floor < world.top_floor, f"{self.name} cannot go above floor {world.top_floor}")
        world.floor += 1
        sim.scheduler.schedule(self, ElevatorStep.ASCEND_ARRIVED, now + sim.timing.up_travel)

    def _ascend_arrived(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        here = world.floor
        demand = world.demand()
        should_stop = (
            world.call_car[here]
            or world.call_up[here]
            or ((here == world.home_floor or world.call_down[here]) and not demand.up)
        )
        if should_stop:
            sim.scheduler.schedule(self, ElevatorStep.REASSESS, now + sim.timing.up_deceleration)
        else:
            sim.scheduler.schedule_immediate(self, ElevatorStep.ASCEND_STEP, now)

    def _descend(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        require(not world.loading, f"{self.name} cannot move with doors loading")
        require(world.floor > 0, f"{self.name} cannot go below floor 0")
        world.floor -= 1
        sim.scheduler.schedule(self, ElevatorStep.DESCEND_ARRIVED, now + sim.timing.down_travel)

    def _descend_arrived(self, sim: "ElevatorSimulation", now: int):
        world = sim.world
        here = world.floor
        demand = world.demand()
        should_stop = (
            world.call_car[here]
            or world.call_down[here]
            or ((here == world.home_floor or world.call_up[here]) and not demand.down)
        )
        if should_stop:
            sim.scheduler.schedule(self, ElevatorStep.REASSESS, now + sim.timing.down_deceleration)
        else:
            sim.scheduler.schedule_immediate(self, ElevatorStep.DESCEND_STEP, now)
