from time import perf_counter
from collections import OrderedDict
from functools import wraps

from BINSEARCHpy.io.log_module import log_rank0


class Clock:
    def __init__(self, name: str):
        self.name = name
        self.call_count = 0
        self.total_time = 0.0
        self._start_time = None

    @property
    def running(self) -> bool:
        return self._start_time is not None

    def start(self):
        if self.running:
            raise RuntimeError(f"Clock '{self.name}' is already running.")
        self._start_time = perf_counter()
        self.call_count += 1

    def stop(self):
        if not self.running:
            raise RuntimeError(f"Clock '{self.name}' was not started.")
        self.total_time += perf_counter() - self._start_time
        self._start_time = None

    def avg_time(self):
        return self.total_time / self.call_count if self.call_count > 0 else 0.0


class TimingManager:
    """Named wall-clock timers, reported on rank 0."""

    def __init__(self):
        self.clocks = OrderedDict()

    def start(self, name: str):
        if name not in self.clocks:
            self.clocks[name] = Clock(name)
        self.clocks[name].start()

    def stop(self, name: str):
        if name not in self.clocks:
            raise ValueError(f"No clock with name '{name}' was started.")
        self.clocks[name].stop()

    def reset(self):
        self.clocks.clear()

    def report(self, header: str = "<global routines>"):
        log_rank0("")
        log_rank0(f"{header:>10}")
        log_rank0(f"{'':13}clock number : {len(self.clocks):5}")
        log_rank0("")
        for clock in self.clocks.values():
            calls = clock.call_count
            if calls == 1:
                log_rank0(f"{clock.name:>20} : {clock.total_time:8.2f}s WALL")
            else:
                log_rank0(
                    f"{clock.name:>20} : {clock.total_time:8.2f}s WALL "
                    f"({calls:8d} calls,{clock.avg_time():8.3f} s avg)"
                )
        log_rank0("")


global_timing = TimingManager()


def timed_function(name: str):
    """Accumulate the run time of the decorated function under clock `name`."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            global_timing.start(name)
            try:
                return func(*args, **kwargs)
            finally:
                global_timing.stop(name)

        return wrapper

    return decorator
