from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Union

# Latest times are unknown until the backward pass assigns them.
INFINITY = inf

Number = Union[int, float]


class CycleError(ValueError):
    """A precedence cycle was found; no schedule can be computed."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Cycle detected in dependencies: {source} -> {target}")


class ValidationError(ValueError):
    """Raised by strict input validation."""


@dataclass
class Activity:
    """
    One vertex of the activity-on-node network.

    `predecessors` is kept as declared; `successors` is derived by the graph
    builder. The timing fields are filled in by the forward and backward
    passes and are meaningless before a successful run.
    """

    id: str
    duration: int
    predecessors: List[str] = field(default_factory=list)
    successors: List[str] = field(default_factory=list)
    earliest_start: Number = 0
    earliest_finish: Number = 0
    latest_start: Number = INFINITY
    latest_finish: Number = INFINITY
    slack: Number = 0

    @property
    def critical(self) -> bool:
        return self.slack == 0

    def reset_timing(self) -> None:
        self.earliest_start = 0
        self.earliest_finish = 0
        self.latest_start = INFINITY
        self.latest_finish = INFINITY
        self.slack = 0


@dataclass
class ScheduleResult:
    activities: Dict[str, Activity]
    order: List[str]
    project_duration: Number

    @property
    def critical_path(self) -> List[str]:
        """Zero-slack activities in topological order."""
        return [taskId for taskId in self.order if self.activities[taskId].slack == 0]

    def __getitem__(self, activity_id: str) -> Activity:
        return self.activities[activity_id]
