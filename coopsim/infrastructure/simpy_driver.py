"""
simpy_driver.py

Runs an ElevatorSimulation as a SimPy process.

The simulation keeps its own scheduler; this driver only mirrors its
clock onto ``env.now`` (one simpy time unit per tick) so that other SimPy
processes, such as the statistics listener reading the broker's pipes,
see events at the simulated instant they happened.
"""

import simpy

from ..core.errors import ContractViolation


class SimpyDriver:
    """
    Drive ``simulation`` from inside a SimPy environment.

    Example:
        >>> env = simpy.Environment()
        >>> driver = SimpyDriver(env, simulation)
        >>> env.process(driver.run(36000))
        >>> env.run(until=36000)
    """

    def __init__(self, env: simpy.Environment, simulation):
        self.env = env
        self.simulation = simulation
        self.steps = 0

    def run(self, deadline: int):
        """
        SimPy process body: resume tasks until the next wake time reaches ``deadline``.
        """
        sim = self.simulation
        while True:
            wake_time = sim.next_wake_time()
            if wake_time is None:
                if sim.input_exhausted:
                    return
                raise ContractViolation(f"Scheduler ran dry at {sim.now}")
            if wake_time >= deadline:
                return
            if wake_time > self.env.now:
                yield self.env.timeout(wake_time - self.env.now)
            self.steps += 1
            if not sim.step():
                return
