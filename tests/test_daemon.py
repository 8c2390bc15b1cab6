import pytest

from dungeoncore.daemon import Phase, Scheduler, SchedulerFull


class Recorder:
    def __init__(self):
        self.calls = []

    def make(self, name):
        def func(arg):
            self.calls.append((name, arg))

        return func


def test_daemon_runs_each_time_in_its_phase():
    rec = Recorder()
    sched = Scheduler()
    sched.start_daemon(rec.make("a"), 7, Phase.AFTER)
    sched.do_daemons(Phase.AFTER)
    sched.do_daemons(Phase.BEFORE)
    sched.do_daemons(Phase.AFTER)
    assert rec.calls == [("a", 7), ("a", 7)]


def test_kill_daemon_stops_it():
    rec = Recorder()
    sched = Scheduler()
    func = rec.make("a")
    sched.start_daemon(func, 0, Phase.BEFORE)
    sched.start_daemon(rec.make("b"), 1, Phase.BEFORE)
    sched.kill_daemon(func)
    sched.kill_daemon(func)
    sched.do_daemons(Phase.BEFORE)
    assert rec.calls == [("b", 1)]


def test_fuse_goes_off_once_after_time():
    rec = Recorder()
    sched = Scheduler()
    sched.fuse(rec.make("f"), 3, 3, Phase.BEFORE)
    sched.do_fuses(Phase.BEFORE)
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == []
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("f", 3)]
    for _ in range(5):
        sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("f", 3)]


def test_fuse_not_counted_in_other_phase():
    rec = Recorder()
    sched = Scheduler()
    sched.fuse(rec.make("f"), 0, 1, Phase.AFTER)
    for _ in range(4):
        sched.do_fuses(Phase.BEFORE)
    assert rec.calls == []
    sched.do_fuses(Phase.AFTER)
    assert rec.calls == [("f", 0)]


def test_fuse_is_not_a_daemon():
    rec = Recorder()
    sched = Scheduler()
    sched.fuse(rec.make("f"), 0, 2, Phase.AFTER)
    sched.do_daemons(Phase.AFTER)
    assert rec.calls == []


def test_daemon_not_counted_down_by_fuses():
    rec = Recorder()
    sched = Scheduler()
    sched.start_daemon(rec.make("d"), 0, Phase.AFTER)
    for _ in range(3):
        sched.do_fuses(Phase.AFTER)
    assert rec.calls == []
    sched.do_daemons(Phase.AFTER)
    assert rec.calls == [("d", 0)]


def test_zero_time_fuse_never_fires():
    rec = Recorder()
    sched = Scheduler()
    sched.fuse(rec.make("f"), 0, 0, Phase.BEFORE)
    for _ in range(3):
        sched.do_fuses(Phase.BEFORE)
    assert rec.calls == []


def test_lengthen_delays_fuse():
    rec = Recorder()
    sched = Scheduler()
    func = rec.make("f")
    sched.fuse(func, 0, 1, Phase.BEFORE)
    sched.fuse(rec.make("g"), 1, 1, Phase.BEFORE)
    sched.lengthen(func, 2)
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("g", 1)]
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("g", 1)]
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("g", 1), ("f", 0)]


def test_extinguish_puts_out_fuse():
    rec = Recorder()
    sched = Scheduler()
    func = rec.make("f")
    sched.fuse(func, 0, 1, Phase.BEFORE)
    sched.fuse(rec.make("g"), 2, 1, Phase.BEFORE)
    sched.extinguish(func)
    sched.do_fuses(Phase.BEFORE)
    assert rec.calls == [("g", 2)]


def test_full_scheduler_raises_and_frees():
    rec = Recorder()
    sched = Scheduler(capacity=2)
    first = rec.make("a")
    sched.start_daemon(first, 0, Phase.BEFORE)
    sched.start_daemon(rec.make("b"), 0, Phase.BEFORE)
    with pytest.raises(SchedulerFull):
        sched.fuse(rec.make("c"), 0, 1, Phase.BEFORE)
    sched.kill_daemon(first)
    sched.start_daemon(rec.make("c"), 0, Phase.BEFORE)
    sched.do_daemons(Phase.BEFORE)
    assert rec.calls == [("c", 0), ("b", 0)]


def test_invalid_phase_rejected():
    sched = Scheduler()
    with pytest.raises(ValueError):
        sched.start_daemon(lambda arg: None, 0, 0)


def test_daemon_can_replace_itself_with_fuse():
    rec = Recorder()
    calls = []
    sched = Scheduler(capacity=1)

    def restart(arg):
        calls.append("restart")
        sched.start_daemon(roller, 0, Phase.BEFORE)

    def roller(arg):
        calls.append("roll")
        sched.kill_daemon(roller)
        sched.fuse(restart, 0, 2, Phase.BEFORE)

    sched.start_daemon(roller, 0, Phase.BEFORE)
    sched.do_daemons(Phase.BEFORE)
    # The single slot now holds the fuse, so nothing else fits.
    with pytest.raises(SchedulerFull):
        sched.start_daemon(rec.make("extra"), 0, Phase.BEFORE)
    sched.do_daemons(Phase.BEFORE)
    sched.do_fuses(Phase.BEFORE)
    sched.do_fuses(Phase.BEFORE)
    sched.do_daemons(Phase.BEFORE)
    with pytest.raises(SchedulerFull):
        sched.fuse(rec.make("extra"), 0, 1, Phase.BEFORE)
    assert calls == ["roll", "restart", "roll"]
    assert rec.calls == []