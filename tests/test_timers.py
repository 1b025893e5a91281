from enginecore.timers import TemplateTimer, Timer


def test_timer_fires_once_when_time_runs_out():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.start(10.0)
    timer.update(4.0)
    assert calls == []
    assert timer.is_running
    timer.update(6.0)
    assert calls == [True]
    assert not timer.is_running
    timer.update(100.0)
    assert calls == [True]


def test_timer_not_started_never_fires():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.update(1000.0)
    assert calls == []
    assert not timer.is_running


def test_timer_overshoot_fires():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.start(1.0)
    timer.update(5.0)
    assert calls == [True]
    assert timer.time_left <= 0


def test_timer_restart():
    calls = []
    timer = Timer(lambda: calls.append(True))
    timer.start(1.0)
    timer.update(1.0)
    timer.start(2.0)
    assert timer.is_running
    timer.update(2.0)
    assert len(calls) == 2


def test_template_timer_passes_argument():
    received = []
    timer = TemplateTimer("explosion", received.append)
    timer.start(3.0)
    timer.update(1.0)
    assert received == []
    timer.update(2.0)
    assert received == ["explosion"]
    assert not timer.is_running