"""
YAML loading and saving for SimulationConfig.

A scenario file holds one ``simulation:`` mapping; any key left out takes
its dataclass default.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from .simulation import SimulationConfig

PathLike = Union[str, Path]


class ConfigLoader:
    """Reads and writes scenario files"""

    @staticmethod
    def _read_mapping(file_path: Path) -> dict:
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a mapping, got {type(data).__name__}")
        return data

    @staticmethod
    def load_simulation(file_path: PathLike) -> SimulationConfig:
        """
        Build a validated SimulationConfig from a scenario file.

        Raises:
            FileNotFoundError: The file is missing
            ValueError: The file is not a mapping or a value is out of range
        """
        data = ConfigLoader._read_mapping(Path(file_path))
        config = SimulationConfig.from_dict(data)
        config.validate()
        return config

    @staticmethod
    def load_or_default(file_path: Optional[PathLike]) -> SimulationConfig:
        """Load ``file_path``, or return the built-in defaults when it is None."""
        if file_path is None:
            return SimulationConfig()
        return ConfigLoader.load_simulation(file_path)

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: PathLike):
        """Write ``config`` as YAML, creating parent directories as needed."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_simulation_config(file_path: PathLike) -> SimulationConfig:
    return ConfigLoader.load_simulation(file_path)


def save_simulation_config(config: SimulationConfig, file_path: PathLike):
    ConfigLoader.save_simulation(config, file_path)
