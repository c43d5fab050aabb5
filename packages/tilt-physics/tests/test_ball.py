"""Tests for ball integration, bounce, and resize clamping."""
from __future__ import annotations

import math

import pytest

from tilt import BallState, Canvas, ScreenAcceleration
from tilt_physics import SimulationConstants, bounce_axis, clamp_to_canvas, step_ball

_CONSTANTS = SimulationConstants()
_STILL = ScreenAcceleration(0.0, 0.0)


class TestSimulationConstants:
    def test_defaults(self) -> None:
        c = SimulationConstants()
        assert (c.friction, c.accel_scale, c.restitution, c.radius) == (
            0.98,
            1.2,
            0.8,
            12.5,
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"friction": 0.0},
            {"friction": 1.0},
            {"accel_scale": 0.0},
            {"restitution": -0.1},
            {"restitution": 1.5},
            {"radius": 0.0},
        ],
    )
    def test_rejects_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            SimulationConstants(**kwargs)


class TestBounceAxis:
    def test_inside_untouched(self) -> None:
        assert bounce_axis(50.0, 3.0, 10.0, 90.0, 0.8) == (50.0, 3.0)

    def test_high_wall(self) -> None:
        pos, vel = bounce_axis(95.0, 5.0, 10.0, 90.0, 0.8)
        assert pos == 90.0
        assert vel == pytest.approx(-4.0)

    def test_low_wall(self) -> None:
        pos, vel = bounce_axis(2.0, -5.0, 10.0, 90.0, 0.8)
        assert pos == 10.0
        assert vel == pytest.approx(4.0)


class TestStepBall:
    def test_first_tick_regression(self) -> None:
        """Device pointing up, no rotation, default constants, 400x400 canvas."""
        canvas = Canvas(400, 400)
        ball = BallState.centered(canvas)
        accel = ScreenAcceleration(0.0, -9.8)

        result = step_ball(ball, accel, _CONSTANTS, canvas)

        # vy = -(-9.8) * 1.2 * 0.98 = 11.5248
        assert result.vx == pytest.approx(0.0)
        assert result.vy == pytest.approx(11.5248)
        assert result.x == pytest.approx(200.0)
        assert result.y == pytest.approx(211.5248)

    def test_horizontal_axis_not_negated(self) -> None:
        canvas = Canvas(400, 400)
        result = step_ball(BallState(200, 200), ScreenAcceleration(2.0, 0.0), _CONSTANTS, canvas)
        # vx = 2 * 1.2 * 0.98
        assert result.vx == pytest.approx(2.352)
        assert result.x == pytest.approx(202.352)

    def test_friction_applies_after_acceleration(self) -> None:
        canvas = Canvas(1000, 1000)
        ball = BallState(500, 500, vx=10.0, vy=0.0)
        result = step_ball(ball, ScreenAcceleration(5.0, 0.0), _CONSTANTS, canvas)
        assert result.vx == pytest.approx((10.0 + 5.0 * 1.2) * 0.98)

    def test_right_wall_clamps_and_reflects(self) -> None:
        canvas = Canvas(400, 300)
        r = _CONSTANTS.radius
        eps = 0.5
        ball = BallState(400 - r + eps, 150.0, vx=3.0, vy=0.0)

        result = step_ball(ball, _STILL, _CONSTANTS, canvas)

        assert result.x == 400 - r
        assert result.vx == pytest.approx(-0.8 * 3.0 * 0.98)

    def test_left_wall_clamps_and_reflects(self) -> None:
        canvas = Canvas(400, 300)
        r = _CONSTANTS.radius
        ball = BallState(r + 1.0, 150.0, vx=-4.0, vy=0.0)

        result = step_ball(ball, _STILL, _CONSTANTS, canvas)

        assert result.x == r
        assert result.vx == pytest.approx(0.8 * 4.0 * 0.98)

    def test_bottom_and_top_walls(self) -> None:
        canvas = Canvas(400, 300)
        r = _CONSTANTS.radius
        down = step_ball(BallState(200, 300 - r, vy=6.0), _STILL, _CONSTANTS, canvas)
        assert down.y == 300 - r
        assert down.vy < 0

        up = step_ball(BallState(200, r, vy=-6.0), _STILL, _CONSTANTS, canvas)
        assert up.y == r
        assert up.vy > 0

    def test_axes_bounce_independently(self) -> None:
        canvas = Canvas(400, 300)
        r = _CONSTANTS.radius
        ball = BallState(400 - r, 150.0, vx=5.0, vy=2.0)
        result = step_ball(ball, _STILL, _CONSTANTS, canvas)
        assert result.vx < 0
        assert result.vy == pytest.approx(2.0 * 0.98)

    def test_velocity_decays_without_input(self) -> None:
        canvas = Canvas(1000, 1000)
        ball = BallState(500, 500, vx=5.0, vy=-3.0)
        speed = math.hypot(ball.vx, ball.vy)
        ticks = 0
        while speed > 1e-3:
            ball = step_ball(ball, _STILL, _CONSTANTS, canvas)
            new_speed = math.hypot(ball.vx, ball.vy)
            assert new_speed < speed
            speed = new_speed
            ticks += 1
            assert ticks < 10_000
        assert ticks > 1

    def test_stays_in_bounds_under_hard_forcing(self) -> None:
        canvas = Canvas(200, 120)
        r = _CONSTANTS.radius
        ball = BallState.centered(canvas)
        accel = ScreenAcceleration(25.0, -40.0)
        for _ in range(500):
            ball = step_ball(ball, accel, _CONSTANTS, canvas)
            assert r <= ball.x <= canvas.width - r
            assert r <= ball.y <= canvas.height - r

    def test_canvas_narrower_than_ball_raises(self) -> None:
        canvas = Canvas(20, 400)
        with pytest.raises(ValueError):
            step_ball(BallState(10.0, 200.0), _STILL, _CONSTANTS, canvas)

    def test_pure(self) -> None:
        canvas = Canvas(400, 400)
        ball = BallState(100, 100, 1.0, 1.0)
        accel = ScreenAcceleration(1.0, 1.0)
        assert step_ball(ball, accel, _CONSTANTS, canvas) == step_ball(
            ball, accel, _CONSTANTS, canvas
        )
        assert ball == BallState(100, 100, 1.0, 1.0)


class TestClampToCanvas:
    def test_pulls_ball_inside_keeps_velocity(self) -> None:
        ball = BallState(500.0, -20.0, vx=3.0, vy=-1.0)
        result = clamp_to_canvas(ball, Canvas(300, 300), 12.5)
        assert result == BallState(287.5, 12.5, 3.0, -1.0)

    def test_inside_unchanged(self) -> None:
        ball = BallState(100.0, 100.0, 1.0, 2.0)
        assert clamp_to_canvas(ball, Canvas(300, 300), 12.5) == ball
