import cpm_selftest


def test_selftest_checks():
    cpm_selftest.test_diamond()
    cpm_selftest.test_sample_project()
    cpm_selftest.test_cycle()


def test_main_prints_report(capsys):
    cpm_selftest.main()
    out = capsys.readouterr().out
    assert "CPM self-test passed" in out
    assert "Minimum project duration: 44" in out
    assert "Critical path: A -> N -> C -> E -> F -> J -> L -> B" in out
