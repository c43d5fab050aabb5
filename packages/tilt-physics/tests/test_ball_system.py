"""Tests for the ball system and the motion-to-ball pipeline."""
from __future__ import annotations

import pytest

from tilt import AccelerationSample, BallState, Engine, ScreenAcceleration, SimulationContext
from tilt_motion import SampleChannel, make_motion_system
from tilt_physics import SimulationConstants, make_ball_system, resize


class TestBallSystem:
    def test_integrates_screen_acceleration(self) -> None:
        engine = Engine(SimulationContext.create(400, 400))
        engine.add_system(make_ball_system())
        engine.context.screen_acceleration = ScreenAcceleration(1.0, 0.0)
        engine.step()
        assert engine.context.ball.vx == pytest.approx(1.2 * 0.98)

    def test_custom_constants(self) -> None:
        engine = Engine(SimulationContext.create(400, 400))
        engine.add_system(make_ball_system(SimulationConstants(friction=0.5, accel_scale=2.0)))
        engine.context.screen_acceleration = ScreenAcceleration(1.0, 0.0)
        engine.step()
        assert engine.context.ball.vx == pytest.approx(1.0)

    def test_at_rest_without_input(self) -> None:
        engine = Engine(SimulationContext.create(400, 400))
        engine.add_system(make_ball_system())
        engine.run(30)
        assert engine.context.ball == BallState(200.0, 200.0, 0.0, 0.0)


class TestStartupCanvas:
    def test_context_too_small_for_default_ball(self) -> None:
        with pytest.raises(ValueError):
            SimulationContext.create(20, 20)

    def test_ball_system_rejects_canvas_smaller_than_its_ball(self) -> None:
        engine = Engine(SimulationContext.create(20, 20, radius=5.0))
        engine.add_system(make_ball_system())
        with pytest.raises(ValueError):
            engine.step()
        assert engine.context.ball == BallState(10.0, 10.0)


class TestResize:
    def test_reclamps_position_keeps_velocity(self) -> None:
        sim = SimulationContext.create(400, 400)
        sim.ball = BallState(380.0, 50.0, vx=4.0, vy=-2.0)
        resize(sim, 200, 200, 12.5)
        assert sim.canvas.width == 200
        assert sim.ball == BallState(187.5, 50.0, 4.0, -2.0)

    def test_too_small_for_ball(self) -> None:
        sim = SimulationContext.create(400, 400)
        with pytest.raises(ValueError):
            resize(sim, 20, 20, 12.5)
        assert sim.canvas.width == 400


class TestMotionToBall:
    def test_end_to_end_first_tick(self) -> None:
        """(0, -9.8, 0) at angle 0, no inversion, accel_scale 1.2, friction 0.98."""
        channel = SampleChannel()
        engine = Engine(SimulationContext.create(400, 400))
        engine.add_system(make_motion_system(channel))
        engine.add_system(make_ball_system(SimulationConstants(friction=0.98, accel_scale=1.2)))

        channel.push(AccelerationSample(0.0, -9.8, 0.0))
        engine.step()

        ball = engine.context.ball
        assert ball.vx == pytest.approx(0.0, abs=1e-12)
        assert ball.vy == pytest.approx(11.5248)
        assert ball.x == pytest.approx(200.0)
        assert ball.y == pytest.approx(211.5248)

    def test_inverted_y_moves_the_other_way(self) -> None:
        channel = SampleChannel()
        engine = Engine(SimulationContext.create(400, 400))
        engine.add_system(make_motion_system(channel))
        engine.add_system(make_ball_system())
        engine.context.flags.toggle_y()

        channel.push(AccelerationSample(0.0, -9.8, 0.0))
        engine.step()

        assert engine.context.ball.vy == pytest.approx(-11.5248)

    def test_rotated_screen_swaps_axes(self) -> None:
        channel = SampleChannel()
        engine = Engine(SimulationContext.create(400, 400))
        engine.context.screen_angle = lambda: 90
        engine.add_system(make_motion_system(channel))
        engine.add_system(make_ball_system())

        channel.push(AccelerationSample(0.0, -9.8, 0.0))
        engine.step()

        # rotate (0, -9.8) by 90 degrees -> (9.8, 0)
        assert engine.context.ball.vx == pytest.approx(11.5248)
        assert engine.context.ball.vy == pytest.approx(0.0, abs=1e-9)
