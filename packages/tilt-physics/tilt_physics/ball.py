"""Ball integration and wall bounce. Pure functions over BallState."""
from __future__ import annotations

from tilt import BallState, Canvas, ScreenAcceleration, vec

from tilt_physics.config import SimulationConstants


def bounce_axis(
    position: float,
    velocity: float,
    low: float,
    high: float,
    restitution: float,
) -> tuple[float, float]:
    """Clamp one axis into [low, high], reflecting and damping velocity on contact."""
    if position > high:
        return high, velocity * -restitution
    if position < low:
        return low, velocity * -restitution
    return position, velocity


def step_ball(
    ball: BallState,
    accel: ScreenAcceleration,
    constants: SimulationConstants,
    canvas: Canvas,
) -> BallState:
    """Advance the ball by one tick.

    Order: accelerate, apply friction, move, then bounce each axis. The
    vertical screen axis is negated so that tilting "up" moves the ball
    toward smaller y. Raises ValueError if the canvas cannot hold the ball.
    """
    r = constants.radius
    canvas.ensure_holds(r)
    force = (accel.sx, -accel.sy)
    velocity = vec.add((ball.vx, ball.vy), vec.scale(force, constants.accel_scale))
    velocity = vec.scale(velocity, constants.friction)
    x, y = vec.add((ball.x, ball.y), velocity)
    vx, vy = velocity

    x, vx = bounce_axis(x, vx, r, canvas.width - r, constants.restitution)
    y, vy = bounce_axis(y, vy, r, canvas.height - r, constants.restitution)
    return BallState(x, y, vx, vy)


def clamp_to_canvas(ball: BallState, canvas: Canvas, radius: float) -> BallState:
    """Pull the ball back inside ``canvas``; velocity is left as it was."""
    return BallState(
        x=vec.clamp(ball.x, radius, canvas.width - radius),
        y=vec.clamp(ball.y, radius, canvas.height - radius),
        vx=ball.vx,
        vy=ball.vy,
    )
