"""
Elevator Simulation Analyzer

This package provides statistical analysis and reporting tools
for the simulated elevator.

Components:
- Statistics: Observer-level data (trajectory, door openings, event log)
- SimulationStatistics: Per-passenger metrics with "God's view"
"""

__version__ = "0.1.0"

from .statistics import Statistics
from .simulation_statistics import SimulationStatistics

__all__ = ['Statistics', 'SimulationStatistics']
