"""
Configuration management package

Provides configuration classes for the simulation and a YAML loader.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    TimingConfig,
    TrafficConfig,
    PolicyConfig,
    OutputConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'TimingConfig',
    'TrafficConfig',
    'PolicyConfig',
    'OutputConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
