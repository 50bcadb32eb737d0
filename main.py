import sys

import simpy

# Configuration
from config import ConfigLoader, SimulationConfig

# Simulator components
from coopsim.core.simulation import ElevatorSimulation
from coopsim.infrastructure.message_broker import MessageBroker
from coopsim.infrastructure.simpy_driver import SimpyDriver

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics


def build_simulation(sim_config: SimulationConfig, env: simpy.Environment):
    """
    Wire the simulation, the broker and the statistics collector together.

    Returns:
        (simulation, statistics) tuple; the statistics listener is already
        registered as a process in ``env``
    """
    broker = MessageBroker(env)
    sim_stats = SimulationStatistics(env, broker.get_broadcast_pipe(), verbose=sim_config.verbose)
    env.process(sim_stats.start_listening())

    simulation = ElevatorSimulation(sim_config, broker=broker)

    sim_stats.set_simulation_metadata({
        'num_floors': sim_config.building.num_floors,
        'home_floor': sim_config.building.home_floor,
        'timing': sim_config.timing.to_dict(),
        'traffic_source': sim_config.traffic.source,
        'boarding_policy': sim_config.policy.boarding,
        'random_seed': sim_config.random_seed,
        'deadline': sim_config.deadline,
    })
    return simulation, sim_stats


def run_simulation(sim_config_path=None, deadline=None):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file (defaults when None)
        deadline: Simulated time limit in ticks (overrides the config)
    """
    print("--- Loading Configuration ---")
    sim_config = ConfigLoader.load_or_default(sim_config_path)
    print(f"Simulation Config: {sim_config_path or 'built-in defaults'}")

    if deadline is not None:
        if deadline <= 0:
            raise ValueError("deadline must be positive")
        sim_config.deadline = deadline

    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    env = simpy.Environment()
    simulation, sim_stats = build_simulation(sim_config, env)
    print(f"Floors: {sim_config.building.num_floors} (home floor {sim_config.building.home_floor})")
    print(f"Passenger source: {sim_config.traffic.source}")
    print(f"Boarding policy: {sim_config.policy.boarding}")

    driver = SimpyDriver(env, simulation)
    env.process(driver.run(sim_config.deadline))

    print("\n--- Simulation Start ---")
    env.run(until=sim_config.deadline)
    print("--- Simulation End ---")
    print(f"Resumed {driver.steps} tasks up to t={sim_config.deadline}")

    if sim_config.output.event_log:
        sim_stats.save_event_log(sim_config.output.event_log)

    sim_stats.print_passenger_metrics_summary()

    if sim_config.output.trajectory_plot:
        sim_stats.plot_trajectory_diagram(sim_config.output.trajectory_plot)

    return simulation, sim_stats


def main():
    # Accept command line arguments: [config.yaml] [deadline]
    sim_config_path = sys.argv[1] if len(sys.argv) > 1 else None
    deadline = int(sys.argv[2]) if len(sys.argv) > 2 else None
    run_simulation(sim_config_path=sim_config_path, deadline=deadline)


if __name__ == '__main__':
    main()
