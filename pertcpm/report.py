"""
Rendering of a finished schedule: console table, critical path and the JSON
view served by the API. Only called with a successful ScheduleResult.
"""
from typing import Any, Dict, List

from pertcpm.model import ScheduleResult
from pertcpm.scheduling import derive_event_nodes

HEADERS = ["Activity", "Duration", "ES", "EF", "LS", "LF", "Slack", "Critical"]


def format_table(result: ScheduleResult) -> str:
    rows: List[List[str]] = []
    for activityId in result.order:
        a = result[activityId]
        rows.append([
            a.id,
            str(a.duration),
            str(a.earliest_start),
            str(a.earliest_finish),
            str(a.latest_start),
            str(a.latest_finish),
            str(a.slack),
            "YES" if a.critical else "NO",
        ])

    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(HEADERS)]

    def line(cells: List[str]) -> str:
        return "| " + " | ".join(c.rjust(w) for c, w in zip(cells, widths)) + " |"

    rule = "-" * len(line(HEADERS))
    return "\n".join([rule, line(HEADERS), rule] + [line(r) for r in rows] + [rule])


def format_critical_path(result: ScheduleResult) -> str:
    return " -> ".join(result.critical_path)


def render_report(result: ScheduleResult) -> str:
    return "\n".join([
        f"Minimum project duration: {result.project_duration}",
        "",
        "PERT/CPM results",
        format_table(result),
        "",
        f"Critical path: {format_critical_path(result)}",
    ])


def result_to_dict(result: ScheduleResult) -> Dict[str, Any]:
    activities: List[Dict[str, Any]] = []
    for activityId in result.order:
        a = result[activityId]
        activities.append({
            "id": a.id,
            "duration": a.duration,
            "predecessors": a.predecessors,
            "successors": a.successors,
            "es": a.earliest_start,
            "ef": a.earliest_finish,
            "ls": a.latest_start,
            "lf": a.latest_finish,
            "slack": a.slack,
            "critical": a.critical,
        })

    return {
        "project_duration": result.project_duration,
        "order": result.order,
        "critical_path": result.critical_path,
        "activities": activities,
        "nodes": derive_event_nodes(result.activities, result.project_duration),
    }
