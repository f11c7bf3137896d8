"""Gravity and collision tests between particles."""

from __future__ import annotations

import math

from particlesim.particle import Circle, Particle
from particlesim.vector import Vector

GRAVITATIONAL_CONSTANT = 0.067


def square_distance(a: Particle, b: Particle) -> float:
    """Return the squared distance between the centres of mass."""
    d = b.center_of_mass - a.center_of_mass
    return d.x * d.x + d.y * d.y


def gravity(a: Particle, b: Particle) -> Vector:
    """Return the gravitational force that ``b`` exerts on ``a``."""
    dist = square_distance(a, b)
    numerator = GRAVITATIONAL_CONSTANT * (a.mass * b.mass)
    # Coincident centres give an unbounded pull rather than an error.
    g_force = numerator / dist if dist else math.inf
    theta = math.atan2(
        b.center_of_mass.y - a.center_of_mass.y,
        b.center_of_mass.x - a.center_of_mass.x,
    )
    return Vector(g_force * math.cos(theta), g_force * math.sin(theta))


def body_distance(body: Circle, particle: Particle) -> int:
    """Return the squared distance from a circle's centre to a particle's centre, truncated."""
    d = body.center() - particle.center
    return int(d.x * d.x + d.y * d.y)


def check_collision(a: Particle, b: Particle) -> bool:
    """Return True when the first body of ``a`` overlaps ``b``."""
    if not a.bodies:
        return False
    reach = a.radius() + b.radius()
    return body_distance(a.bodies[0].circle, b) <= reach * reach