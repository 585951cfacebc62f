import pytest

from BINSEARCHpy.utils.timing import Clock, TimingManager, global_timing, timed_function


def test_clock_counts_calls():
    clock = Clock("work")
    for _ in range(3):
        clock.start()
        clock.stop()

    assert clock.call_count == 3
    assert clock.total_time >= 0.0
    assert clock.avg_time() == pytest.approx(clock.total_time / 3)


def test_clock_misuse():
    clock = Clock("work")
    with pytest.raises(RuntimeError):
        clock.stop()
    clock.start()
    with pytest.raises(RuntimeError):
        clock.start()


def test_stop_unknown_clock():
    with pytest.raises(ValueError):
        TimingManager().stop("missing")


def test_timed_function_stops_on_error():

    @timed_function("test_timed_function_stops_on_error")
    def fails():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        fails()

    clock = global_timing.clocks["test_timed_function_stops_on_error"]
    assert not clock.running
    assert clock.call_count == 1


def test_report(capfd):
    timing = TimingManager()
    timing.start("once")
    timing.stop("once")
    for _ in range(2):
        timing.start("twice")
        timing.stop("twice")

    timing.report()

    out, _ = capfd.readouterr()
    assert "clock number :     2" in out
    assert "once :" in out
    assert "2 calls" in out
