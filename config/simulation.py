"""
Simulation Configuration

Every timing constant the automata use lives here, so nothing inside the
simulation core is hard-coded. All durations are integer ticks (tenths
of a second).
"""

from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 5
    home_floor: int = 2  # where the car parks when idle

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if not (0 <= self.home_floor < self.num_floors):
            raise ValueError(f"home_floor must be between 0 and {self.num_floors - 1}")


@dataclass
class TimingConfig:
    """Fixed durations of the elevator, in ticks"""
    door_close_rapid: int = 25          # door-close timer after the first rider picks a direction
    inactivity_window: int = 300        # doors opened -> inactivity timer
    door_close_delay: int = 76          # doors opened -> door-close timer
    door_open: int = 20                 # doors opening
    leaving: int = 25                   # one rider getting out
    entering: int = 25                  # one rider getting in
    flutter_delay: int = 40             # door-close timer postponed while people pass
    door_close: int = 20                # doors closing
    up_acceleration: int = 15
    down_acceleration: int = 15
    door_open_from_decision: int = 20   # dormant car opening on a home-floor call
    homing_delay: int = 20              # dormant car starting towards a call
    up_travel: int = 51                 # one floor up
    up_deceleration: int = 14
    down_travel: int = 61               # one floor down
    down_deceleration: int = 23

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"timing.{f.name} must be an integer number of ticks")
            if value < 0:
                raise ValueError(f"timing.{f.name} cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'TimingConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown timing keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class TrafficConfig:
    """Passenger arrival configuration"""
    source: str = "random"  # random, knuth, knuth_then_random
    min_patience: int = 300
    max_patience: int = 1200
    min_inter_arrival: int = 10
    max_inter_arrival: int = 900

    def __post_init__(self):
        if self.source not in ["random", "knuth", "knuth_then_random"]:
            raise ValueError("source must be 'random', 'knuth' or 'knuth_then_random'")
        if self.min_patience < 0 or self.max_patience < self.min_patience:
            raise ValueError("patience range must satisfy 0 <= min_patience <= max_patience")
        if self.min_inter_arrival < 0 or self.max_inter_arrival < self.min_inter_arrival:
            raise ValueError("inter-arrival range must satisfy 0 <= min_inter_arrival <= max_inter_arrival")


@dataclass
class PolicyConfig:
    """Control policy variants"""
    boarding: str = "unconditional"  # unconditional, directional

    def __post_init__(self):
        if self.boarding not in ["unconditional", "directional"]:
            raise ValueError("boarding must be 'unconditional' or 'directional'")


@dataclass
class OutputConfig:
    """Where the CLI writes its artifacts (None = skip)"""
    event_log: Optional[str] = None
    trajectory_plot: Optional[str] = None


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, timing, traffic and policy settings with the run
    controls.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Simulation control
    random_seed: Optional[int] = None
    deadline: int = 36000  # one simulated hour
    verbose: bool = False
    check_invariants: bool = False

    def __post_init__(self):
        if self.deadline <= 0:
            raise ValueError("deadline must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data) or {}

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 5),
            home_floor=building_data.get('home_floor', 2)
        )

        timing = TimingConfig.from_dict(sim_data.get('timing', {}))

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            source=traffic_data.get('source', 'random'),
            min_patience=traffic_data.get('min_patience', 300),
            max_patience=traffic_data.get('max_patience', 1200),
            min_inter_arrival=traffic_data.get('min_inter_arrival', 10),
            max_inter_arrival=traffic_data.get('max_inter_arrival', 900)
        )

        policy_data = sim_data.get('policy', {})
        policy = PolicyConfig(
            boarding=policy_data.get('boarding', 'unconditional')
        )

        output_data = sim_data.get('output', {})
        output = OutputConfig(
            event_log=output_data.get('event_log'),
            trajectory_plot=output_data.get('trajectory_plot')
        )

        return cls(
            building=building,
            timing=timing,
            traffic=traffic,
            policy=policy,
            output=output,
            random_seed=sim_data.get('random_seed'),
            deadline=sim_data.get('deadline', 36000),
            verbose=sim_data.get('verbose', False),
            check_invariants=sim_data.get('check_invariants', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors,
                    'home_floor': self.building.home_floor
                },
                'timing': self.timing.to_dict(),
                'traffic': {
                    'source': self.traffic.source,
                    'min_patience': self.traffic.min_patience,
                    'max_patience': self.traffic.max_patience,
                    'min_inter_arrival': self.traffic.min_inter_arrival,
                    'max_inter_arrival': self.traffic.max_inter_arrival
                },
                'policy': {
                    'boarding': self.policy.boarding
                },
                'output': {
                    'event_log': self.output.event_log,
                    'trajectory_plot': self.output.trajectory_plot
                },
                'deadline': self.deadline,
                'verbose': self.verbose,
                'check_invariants': self.check_invariants
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        # The built-in fixture is laid out for the five-floor building
        if self.traffic.source != "random" and self.building.num_floors < 5:
            raise ValueError(f"traffic.source '{self.traffic.source}' needs at least 5 floors")
