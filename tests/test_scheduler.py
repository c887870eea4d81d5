from meetingcost.scheduler import ManualScheduler


def test_recurring_tick_fires_once_per_interval():
    scheduler = ManualScheduler()
    fired = []
    scheduler.schedule_tick(lambda: fired.append(scheduler.now), 1.0)

    scheduler.advance(0.5)
    assert fired == []
    scheduler.advance(3)
    assert fired == [1.0, 2.0, 3.0]
    assert scheduler.now == 3.5


def test_once_fires_a_single_time():
    scheduler = ManualScheduler()
    fired = []
    scheduler.schedule_once(lambda: fired.append("done"), 2.0)

    scheduler.advance(10)
    assert fired == ["done"]
    assert scheduler.pending == 0


def test_cancel_stops_callbacks():
    scheduler = ManualScheduler()
    fired = []
    handle = scheduler.schedule_tick(lambda: fired.append(1), 1.0)
    scheduler.advance(2)
    scheduler.cancel(handle)
    scheduler.advance(5)
    assert fired == [1, 1]


def test_cancel_unknown_handle_is_ignored():
    scheduler = ManualScheduler()
    scheduler.cancel(None)
    scheduler.cancel(999)
    assert scheduler.pending == 0


def test_callback_can_cancel_its_own_handle():
    scheduler = ManualScheduler()
    fired = []
    handle = None

    def cb():
        fired.append(scheduler.now)
        if len(fired) == 2:
            scheduler.cancel(handle)

    handle = scheduler.schedule_tick(cb, 1.0)
    scheduler.advance(10)
    assert fired == [1.0, 2.0]


def test_callbacks_fire_in_due_order():
    scheduler = ManualScheduler()
    order = []
    scheduler.schedule_once(lambda: order.append("late"), 2.5)
    scheduler.schedule_tick(lambda: order.append("tick"), 1.0)
    scheduler.advance(3)
    assert order == ["tick", "tick", "late", "tick"]


def test_fractional_advances_do_not_drift():
    scheduler = ManualScheduler()
    fired = []
    scheduler.schedule_tick(lambda: fired.append(scheduler.now), 1.0)

    for _ in range(10):
        scheduler.advance(0.1)

    assert fired == [1.0]
    assert scheduler.now == 1.0
