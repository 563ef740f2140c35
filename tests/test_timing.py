from timing import start_timer, stop_timer


def test_stop_timer_reports_elapsed(capsys):
    ticks = iter([10.0, 12.5])
    tm = start_timer("Solve Problem", clock=lambda: next(ticks))

    assert stop_timer(tm) == 2.5
    assert capsys.readouterr().out == "[Timer] Solve Problem: 2.500000 seconds\n"
