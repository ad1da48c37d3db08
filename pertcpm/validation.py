from typing import Any, List, Sequence

from pertcpm.graph import parse_precedence
from pertcpm.model import ValidationError


def validate_rows(rows: Sequence[Any]) -> None:
    """
    Strict validation of (id, duration, precedence spec) rows:
      - Each row must have exactly three fields
      - Each activity must have a unique non-empty string id
      - 'duration' must be an integer >= 0
      - predecessors must be existing ids (no self-dependency)
    Raises ValidationError with a clear message if invalid.

    The default scheduling path is lenient and skips this entirely.
    """
    if not isinstance(rows, (list, tuple)) or not rows:
        raise ValidationError("Input must be a non-empty list of activity rows")

    ids: List[str] = []
    for i, row in enumerate(rows, start=1):
        if not isinstance(row, (list, tuple)) or len(row) != 3:
            raise ValidationError(f"Row #{i} must be (id, duration, predecessors)")
        activityId, duration, spec = row

        if not isinstance(activityId, str) or not activityId.strip():
            raise ValidationError(f"Row #{i} has invalid id (must be non-empty string).")
        ids.append(activityId)

        # bool is an int subclass
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise ValidationError(f"Activity {activityId}: duration must be an integer.")
        if duration < 0:
            raise ValidationError(f"Activity {activityId}: duration must be >= 0.")

        if spec is not None and not isinstance(spec, (str, list, tuple)):
            raise ValidationError(f"Activity {activityId}: predecessors must be a string or a list.")
        if activityId in parse_precedence(spec):
            raise ValidationError(f"Activity {activityId}: cannot depend on itself.")

    id_set = set(ids)
    if len(id_set) != len(ids):
        seen, dups = set(), set()
        for x in ids:
            if x in seen:
                dups.add(x)
            seen.add(x)
        dup_list = ", ".join(sorted(dups))
        raise ValidationError(f"Duplicate activity ids found: {dup_list}")

    for activityId, _, spec in rows:
        for pred in parse_precedence(spec):
            if pred not in id_set:
                raise ValidationError(f"Activity {activityId}: predecessor '{pred}' does not exist.")
