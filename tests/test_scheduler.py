from __future__ import annotations

from bullseye.core.common import Mode, Outcome
from bullseye.core.scheduler import SpawnScheduler


def test_start_arms_with_the_curve_start_delay(make_ctx) -> None:
    ctx = make_ctx(difficulty=1)
    sched = SpawnScheduler(ctx)

    sched.start(0)

    assert sched.armed
    assert sched.next_spawn_ms == 2000


def test_nothing_spawns_before_the_deadline(make_ctx) -> None:
    ctx = make_ctx()
    sched = SpawnScheduler(ctx)
    sched.start(0)

    assert sched.poll(1999) is None
    assert len(ctx.pool) == 0


def test_spawn_resamples_elapsed_time_when_rearming(make_ctx) -> None:
    ctx = make_ctx(difficulty=1)
    sched = SpawnScheduler(ctx)
    sched.start(0)

    assert sched.poll(2000) is None
    assert len(ctx.pool) == 1
    # 2s elapsed at 3ms/s ramp
    assert sched.next_spawn_ms == 2000 + 1994


def test_intervals_shrink_as_the_run_progresses(make_ctx) -> None:
    ctx = make_ctx(difficulty=10)
    sched = SpawnScheduler(ctx)
    sched.start(0)

    fired_at = []
    for now in range(0, 60_000, 10):
        before = len(ctx.pool)
        sched.poll(now)
        if len(ctx.pool) > before:
            fired_at.append(now)

    gaps = [b - a for a, b in zip(fired_at, fired_at[1:])]
    assert len(gaps) > 10
    # 10ms polling granularity
    assert all(later <= earlier + 10 for earlier, later in zip(gaps, gaps[1:]))
    assert gaps[-1] < gaps[0]


def test_timed_spawns_timed_targets_and_tracking_spawns_tracking(make_ctx) -> None:
    for mode in Mode:
        ctx = make_ctx(mode=mode)
        sched = SpawnScheduler(ctx)
        sched.start(0)
        sched.poll(10_000)
        (target,) = ctx.pool.targets()
        assert target.mode is mode


def test_cancel_disarms_immediately(make_ctx) -> None:
    ctx = make_ctx()
    sched = SpawnScheduler(ctx)
    sched.start(0)

    sched.cancel()

    assert not sched.armed
    assert sched.poll(100_000) is None
    assert len(ctx.pool) == 0


def test_inactive_run_never_arms_or_spawns(make_ctx) -> None:
    ctx = make_ctx()
    ctx.running = False
    sched = SpawnScheduler(ctx)
    sched.start(0)
    assert not sched.armed

    ctx.running = True
    sched.start(0)
    ctx.running = False
    assert sched.poll(5000) is None
    assert len(ctx.pool) == 0
    assert not sched.armed


def test_sixth_tracking_target_overwhelms(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING)
    sched = SpawnScheduler(ctx)
    sched.start(0)

    outcomes = []
    now = 0
    while len(ctx.pool) < 6:
        now = sched.next_spawn_ms
        outcomes.append(sched.poll(now))

    assert outcomes[:5] == [None] * 5
    assert outcomes[5] is Outcome.OVERWHELMED
    assert not sched.armed


def test_many_timed_targets_never_overwhelm_on_spawn(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TIMED)
    sched = SpawnScheduler(ctx)
    sched.start(0)

    for _ in range(10):
        assert sched.poll(sched.next_spawn_ms) is None
    assert len(ctx.pool) == 10
