from dataclasses import asdict, dataclass

from .world import Direction


def _flag(value: bool) -> str:
    return "X" if value else "0"


@dataclass(frozen=True)
class TraceRecord:
    """Snapshot taken just before a task is resumed."""

    time: int
    direction: Direction
    floor: int
    loading: bool
    recently_active: bool
    idle_open: bool
    task_label: str
    task_name: str

    def format(self) -> str:
        """Render as ``TTTT D F L A I label``, e.g. ``0291 U 0 0 X 0 E7``."""
        return (
            f"{self.time:04d} {self.direction.value} {self.floor} "
            f"{_flag(self.loading)} {_flag(self.recently_active)} {_flag(self.idle_open)} "
            f"{self.task_label}"
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["direction"] = self.direction.name
        return data
