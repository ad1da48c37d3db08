from typing import Dict, Iterable, List, Sequence, Tuple, Union

from pertcpm.logger import configure_logging
from pertcpm.model import Activity

logger = configure_logging(__name__)

NO_PREDECESSORS = "-"

PrecedenceSpec = Union[str, Sequence[str], None]
Row = Tuple[str, int, PrecedenceSpec]


def parse_precedence(spec: PrecedenceSpec) -> List[str]:
    """
    Turn a precedence spec into a list of ids.

    "A, B" -> ["A", "B"]; "-" and empty tokens are dropped. A list of ids is
    filtered the same way, so the JSON API can send either form.
    """
    if spec is None:
        return []
    tokens = spec.split(",") if isinstance(spec, str) else spec
    predecessors: List[str] = []
    for token in tokens:
        token = str(token).strip()
        if token and token != NO_PREDECESSORS:
            predecessors.append(token)
    return predecessors


def build_graph(rows: Iterable[Row]) -> Dict[str, Activity]:
    """
    Build the activity map from (id, duration, precedence spec) rows.

    A repeated id replaces the earlier activity (last row wins). Predecessors
    that are not in the map are kept as declared but get no successor edge.
    """
    activities: Dict[str, Activity] = {}
    for activityId, duration, spec in rows:
        activities[activityId] = Activity(
            id=activityId,
            duration=duration,
            predecessors=parse_precedence(spec),
        )

    # Sorted iteration keeps every successor list sorted by id.
    for activityId in sorted(activities):
        for pred in activities[activityId].predecessors:
            if pred in activities:
                activities[pred].successors.append(activityId)

    logger.debug("Activity graph built with %d activities", len(activities))
    return activities


def rows_from_dicts(items: Iterable[dict]) -> List[Row]:
    """Convert JSON activity objects into builder rows."""
    return [
        (item["id"], item["duration"], item.get("predecessors"))
        for item in items
    ]
