from meetingcost.flags import EphemeralFlag
from meetingcost.scheduler import ManualScheduler


def test_flag_resets_after_duration():
    scheduler = ManualScheduler()
    flag = EphemeralFlag(scheduler)

    flag.set()
    assert flag.value
    scheduler.advance(1.9)
    assert flag
    scheduler.advance(0.2)
    assert not flag
    assert scheduler.pending == 0


def test_setting_again_restarts_countdown():
    scheduler = ManualScheduler()
    flag = EphemeralFlag(scheduler, duration=2.0)

    flag.set()
    scheduler.advance(1.5)
    flag.set()
    scheduler.advance(1.5)
    assert flag.value
    assert scheduler.pending == 1
    scheduler.advance(0.5)
    assert not flag.value


def test_clear_cancels_pending_reset():
    scheduler = ManualScheduler()
    changes = []
    flag = EphemeralFlag(scheduler, on_change=changes.append)

    flag.set()
    flag.clear()
    scheduler.advance(5)

    assert changes == [True, False]
    assert scheduler.pending == 0


def test_on_change_reports_expiry():
    scheduler = ManualScheduler()
    changes = []
    flag = EphemeralFlag(scheduler, duration=0.5, on_change=changes.append)

    flag.set()
    flag.set()
    scheduler.advance(1)

    assert changes == [True, False]
