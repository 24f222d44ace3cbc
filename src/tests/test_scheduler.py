import pytest

from game_system import PlaybackScheduler


@pytest.fixture()
def scheduler(clock, logger):
    return PlaybackScheduler(clock, logger)


def test_first_step_fires_on_first_update(scheduler):
    fired = []
    scheduler.schedule([lambda: fired.append("a"), lambda: fired.append("b")], delay_ms=1000)

    assert scheduler.update() is True
    assert fired == ["a"]
    assert scheduler.pending_count() == 1


def test_steps_fire_in_order_one_delay_apart(scheduler, clock):
    fired = []
    scheduler.schedule([lambda i=i: fired.append(i) for i in range(3)], delay_ms=1000)
    scheduler.update()

    clock.advance_ms(999)
    assert scheduler.update() is False
    assert fired == [0]

    clock.advance_ms(1)
    scheduler.update()
    assert fired == [0, 1]

    clock.advance_ms(1000)
    scheduler.update()
    assert fired == [0, 1, 2]
    assert not scheduler.is_finished()


def test_finishes_one_delay_after_last_step(scheduler, clock):
    scheduler.schedule([lambda: None], delay_ms=500)
    scheduler.update()
    assert scheduler.is_active()

    clock.advance_ms(499)
    scheduler.update()
    assert not scheduler.is_finished()

    clock.advance_ms(1)
    scheduler.update()
    assert scheduler.is_finished()
    assert not scheduler.is_active()


def test_stalled_frame_does_not_coalesce_steps(scheduler, clock):
    fired = []
    scheduler.schedule([lambda i=i: fired.append(i) for i in range(3)], delay_ms=1000)
    scheduler.update()

    # Frame stalled for five delays: only the next step runs
    clock.advance_ms(5000)
    scheduler.update()
    scheduler.update()
    assert fired == [0, 1]

    # Delay counts from when step 1 actually fired
    clock.advance_ms(999)
    scheduler.update()
    assert fired == [0, 1]
    clock.advance_ms(1)
    scheduler.update()
    assert fired == [0, 1, 2]


def test_cancel_drops_pending_steps(scheduler, clock):
    fired = []
    scheduler.schedule([lambda i=i: fired.append(i) for i in range(3)], delay_ms=1000)
    scheduler.update()

    scheduler.cancel()
    clock.advance_ms(10000)
    for _ in range(5):
        assert scheduler.update() is False

    assert fired == [0]
    assert not scheduler.is_finished()
    assert scheduler.pending_count() == 0


def test_rejects_non_positive_delay(scheduler):
    with pytest.raises(ValueError):
        scheduler.schedule([lambda: None], delay_ms=0)
