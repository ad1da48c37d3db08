# cpm_selftest.py
from pertcpm.graph import build_graph
from pertcpm.model import CycleError
from pertcpm.report import render_report
from pertcpm.sample import SAMPLE_PROJECT
from pertcpm.scheduling import compute_pert_cpm, schedule


def check_times(result, expected):
    """Helper: expected maps id -> (es, ef, ls, lf, slack)."""
    for tid, (es, ef, ls, lf, slack) in expected.items():
        a = result[tid]
        actual = (a.earliest_start, a.earliest_finish, a.latest_start, a.latest_finish, a.slack)
        assert actual == (es, ef, ls, lf, slack), f"{tid}: expected {(es, ef, ls, lf, slack)}, got {actual}"


def test_diamond():
    # A(3) -> B(2) -> D(1)
    #      -> C(4) ->
    res = schedule([("A", 3, "-"), ("B", 2, "A"), ("C", 4, "A"), ("D", 1, "B,C")])
    assert res.order == ["A", "C", "B", "D"], f"Unexpected order {res.order}"
    check_times(res, {
        "A": (0, 3, 0, 3, 0),
        "B": (3, 5, 5, 7, 2),
        "C": (3, 7, 3, 7, 0),
        "D": (7, 8, 7, 8, 0),
    })
    assert res.project_duration == 8, f"Project duration: expected 8, got {res.project_duration}"
    assert res.critical_path == ["A", "C", "D"], f"Critical path: got {res.critical_path}"


def test_sample_project():
    res = schedule(SAMPLE_PROJECT)
    assert res.project_duration == 44, f"Project duration: expected 44, got {res.project_duration}"
    assert res.critical_path == ["A", "N", "C", "E", "F", "J", "L", "B"], f"Critical path: got {res.critical_path}"


def test_cycle():
    activities = build_graph([("X", 1, "Y"), ("Y", 1, "X")])
    assert compute_pert_cpm(activities) is None, "Cycle should abort the computation"
    try:
        schedule([("X", 1, "Y"), ("Y", 1, "X")])
    except CycleError:
        pass
    else:
        raise AssertionError("schedule() should raise CycleError")


def main():
    test_diamond()
    test_sample_project()
    test_cycle()
    print("CPM self-test passed: diamond + sample project + cycle")
    print()
    print(render_report(schedule(SAMPLE_PROJECT)))


if __name__ == "__main__":
    main()
