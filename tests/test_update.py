from __future__ import annotations

import pytest

from bullseye.core.common import Arena, Mode, Outcome
from bullseye.core.update import step, update_timed, update_tracking


def test_timed_targets_shrink_linearly_to_the_floor(make_ctx) -> None:
    ctx = make_ctx()
    t = ctx.pool.create_timed(ctx.arena, 0)
    t.start_size = t.size = 80

    update_timed(ctx, 1500)
    assert t.size == pytest.approx(50.0)

    update_timed(ctx, 2999)
    assert t.size == pytest.approx(80 - 60 * 2999 / 3000)
    assert t.id in ctx.pool
    assert ctx.stats.expired_misses == 0


def test_timed_target_expires_at_its_deadline(make_ctx) -> None:
    ctx = make_ctx()
    t = ctx.pool.create_timed(ctx.arena, 1000)

    assert update_timed(ctx, 4000) is None
    assert t.id not in ctx.pool
    assert ctx.stats.expired_misses == 1


def test_four_expirations_do_not_end_the_run(make_ctx) -> None:
    ctx = make_ctx()
    for _ in range(4):
        ctx.pool.create_timed(ctx.arena, 0)

    assert step(ctx, 3000, 0.016) is None
    assert ctx.stats.expired_misses == 4
    assert len(ctx.pool) == 0


def test_fifth_expiration_overwhelms_and_stops_processing(make_ctx) -> None:
    ctx = make_ctx()
    for _ in range(6):
        ctx.pool.create_timed(ctx.arena, 0)

    assert step(ctx, 3000, 0.016) is Outcome.OVERWHELMED
    assert ctx.stats.expired_misses == 5
    # the sixth target was never reached this tick
    assert len(ctx.pool) == 1


def test_expired_misses_accumulate_across_ticks(make_ctx) -> None:
    ctx = make_ctx()
    ctx.stats.expired_misses = 4
    ctx.pool.create_timed(ctx.arena, 0)
    assert update_timed(ctx, 3000) is Outcome.OVERWHELMED


def test_tracking_moves_by_velocity(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING)
    t = ctx.pool.create_tracking(ctx.arena, shields=False)
    t.x, t.y, t.size, t.vx, t.vy = 400.0, 300.0, 60.0, 100.0, -50.0

    update_tracking(ctx, 0.5)

    assert (t.x, t.y) == (pytest.approx(450.0), pytest.approx(275.0))
    assert (t.vx, t.vy) == (100.0, -50.0)


def test_tracking_bounces_off_left_wall(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING)
    t = ctx.pool.create_tracking(ctx.arena, shields=False)
    t.x, t.y, t.size, t.vx, t.vy = 31.0, 300.0, 60.0, -100.0, 0.0

    update_tracking(ctx, 0.1)

    assert t.x == 30.0
    assert t.vx == 100.0


def test_tracking_corner_reflects_both_axes(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING, arena=Arena(800, 600))
    t = ctx.pool.create_tracking(ctx.arena, shields=False)
    t.x, t.y, t.size, t.vx, t.vy = 765.0, 565.0, 60.0, 120.0, 90.0

    update_tracking(ctx, 0.1)

    assert (t.x, t.y) == (770.0, 570.0)
    assert (t.vx, t.vy) == (-120.0, -90.0)


def test_tracking_step_never_removes(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING)
    for _ in range(5):
        ctx.pool.create_tracking(ctx.arena, shields=False)

    for i in range(200):
        assert step(ctx, i * 16, 0.016) is None
    assert len(ctx.pool) == 5
    for t in ctx.pool:
        assert t.radius <= t.x <= ctx.arena.width - t.radius
        assert t.radius <= t.y <= ctx.arena.height - t.radius


def test_negative_dt_is_clamped(make_ctx) -> None:
    ctx = make_ctx(mode=Mode.TRACKING)
    t = ctx.pool.create_tracking(ctx.arena, shields=False)
    before = (t.x, t.y)

    step(ctx, 0, -0.5)

    assert (t.x, t.y) == before
