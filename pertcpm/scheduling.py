from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pertcpm.config import settings
from pertcpm.graph import Row, build_graph
from pertcpm.logger import configure_logging
from pertcpm.model import Activity, CycleError, Number, ScheduleResult
from pertcpm.validation import validate_rows

logger = configure_logging(__name__)

UNVISITED, IN_PROGRESS, DONE = 0, 1, 2


def topological_sort(activities: Dict[str, Activity]) -> List[str]:
    """
    Depth-first topological sort with three-colour cycle detection.

    Roots are tried in id order and successors in list order, exactly like
    the recursive formulation, but with an explicit stack so long chains do
    not hit the recursion limit. Raises CycleError on the first back edge.
    """
    state: Dict[str, int] = {activityId: UNVISITED for activityId in activities}
    postOrder: List[str] = []

    for rootId in sorted(activities):
        if state[rootId] != UNVISITED:
            continue
        state[rootId] = IN_PROGRESS
        stack = [(rootId, iter(activities[rootId].successors))]

        while stack:
            currentId, pending = stack[-1]
            for succId in pending:
                if succId not in activities:
                    continue
                if state[succId] == IN_PROGRESS:
                    raise CycleError(currentId, succId)
                if state[succId] == UNVISITED:
                    state[succId] = IN_PROGRESS
                    stack.append((succId, iter(activities[succId].successors)))
                    break
            else:
                state[currentId] = DONE
                postOrder.append(currentId)
                stack.pop()

    postOrder.reverse()
    return postOrder


def forward_pass(activities: Dict[str, Activity], order: List[str]) -> None:
    for activityId in order:
        activity = activities[activityId]
        activity.earliest_start = max(
            (activities[p].earliest_finish for p in activity.predecessors if p in activities),
            default=0,
        )
        activity.earliest_finish = activity.earliest_start + activity.duration


def project_duration(activities: Dict[str, Activity]) -> Number:
    """Latest earliest-finish among the sink activities."""
    return max(
        (a.earliest_finish for a in activities.values() if not _present_successors(activities, a)),
        default=0,
    )


def backward_pass(activities: Dict[str, Activity], order: List[str], projectDuration: Number) -> None:
    for activityId in reversed(order):
        activity = activities[activityId]
        activity.latest_finish = min(
            (activities[s].latest_start for s in _present_successors(activities, activity)),
            default=projectDuration,
        )
        activity.latest_start = activity.latest_finish - activity.duration
        activity.slack = activity.latest_start - activity.earliest_start
        if activity.slack < 0:
            logger.warning("Activity %s has negative slack %s", activityId, activity.slack)


def compute_pert_cpm(activities: Dict[str, Activity]) -> Optional[List[str]]:
    """
    Run the full PERT/CPM computation in place.

    Returns the topological order, or None when the network has a cycle; in
    that case no timing field has been touched.
    """
    try:
        order = topological_sort(activities)
    except CycleError as e:
        logger.error("PERT/CPM computation aborted: %s", e)
        return None
    _propagate(activities, order)
    return order


def critical_path(activities: Dict[str, Activity], order: List[str]) -> List[str]:
    return [activityId for activityId in order if activities[activityId].slack == 0]


def schedule(rows: Iterable[Row], strict: Optional[bool] = None) -> ScheduleResult:
    """
    Validate (strict mode only), build and schedule a project.

    Unlike compute_pert_cpm this raises CycleError instead of returning None.
    """
    rows = list(rows)
    if strict is None:
        strict = settings.STRICT_VALIDATION
    if strict:
        validate_rows(rows)

    activities = build_graph(rows)
    order = topological_sort(activities)
    projectDuration = _propagate(activities, order)
    return ScheduleResult(activities=activities, order=order, project_duration=projectDuration)


def derive_event_nodes(activities: Dict[str, Activity], projectDuration: Number) -> List[Dict[str, Any]]:
    """
    Derive AOA-style event (node) times from AON results.
    Each unique predecessor set becomes one event node.
    """
    groups: Dict[Tuple[str, ...], List[str]] = defaultdict(list)
    for activityId in sorted(activities):
        key = tuple(sorted({p for p in activities[activityId].predecessors if p in activities}))
        groups[key].append(activityId)

    nodes: List[Dict[str, Any]] = [{
        "node": "START",
        "earliest": 0,
        "latest": 0,
        "members": groups.pop((), []),
    }]

    for key in sorted(groups, key=lambda k: (max(activities[p].earliest_finish for p in k), k)):
        members = groups[key]
        nodes.append({
            "node": "after{" + ",".join(key) + "}",
            "earliest": max(activities[p].earliest_finish for p in key),
            "latest": min(activities[m].latest_start for m in members),
            "members": members,
        })

    nodes.append({"node": "END", "earliest": projectDuration, "latest": projectDuration, "members": []})
    return nodes


def _propagate(activities: Dict[str, Activity], order: List[str]) -> Number:
    logger.debug("Topological order: %s", " ".join(order))
    forward_pass(activities, order)
    projectDuration = project_duration(activities)
    logger.info("Minimum project duration: %s", projectDuration)
    backward_pass(activities, order, projectDuration)
    return projectDuration


def _present_successors(activities: Dict[str, Activity], activity: Activity) -> List[str]:
    return [s for s in activity.successors if s in activities]
