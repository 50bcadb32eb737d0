"""
Contract errors for the simulation core.

The simulation is closed and deterministic: a broken invariant makes every
later simulated instant meaningless, so the core raises instead of
repairing state.
"""


class ContractViolation(RuntimeError):
    """Raised when a scheduling or world-state contract is broken."""


def require(condition: bool, message: str):
    """Raise ContractViolation with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ContractViolation(message)
