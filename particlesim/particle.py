"""Particles built from one or more circular bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from particlesim.vector import Vector

BLUE = (0, 0, 255)
RED = (255, 0, 0)


@dataclass
class Circle:
    """A circle whose ``position`` is the top-left corner of its bounding box."""

    radius: float
    position: Vector = field(default_factory=Vector)
    fill_color: tuple = BLUE

    def center(self) -> Vector:
        """Return the centre of the circle."""
        return self.position + Vector(self.radius, self.radius)


@dataclass
class Body:
    """One circle of a particle, possibly attached to a parent body."""

    circle: Circle
    x_offset: int = 0
    y_offset: int = 0
    body_center: Vector = field(default_factory=Vector)
    parent: Optional[Body] = None


def _copy_body(body: Body) -> Body:
    return replace(body, circle=replace(body.circle))


class Particle:
    """A massive particle made of one or more bodies that move together."""

    def __init__(self, radius, mass, xpos, ypos):
        self.body = Body(Circle(float(radius), Vector(float(xpos), float(ypos)), BLUE))
        self.mass = mass
        self.direction = 0.0
        self.position = Vector(xpos, ypos)
        self.center = Vector(xpos + radius, ypos + radius)
        self.center_of_mass = self.center
        self.velocity = Vector()
        self.acceleration = Vector()
        self.force = Vector()
        self.bodies = [_copy_body(self.body)]

    def __repr__(self) -> str:
        return (
            f"Particle(mass={self.mass!r}, center={self.center!r}, "
            f"velocity={self.velocity!r}, bodies={len(self.bodies)})"
        )

    def radius(self) -> int:
        """Return the radius of the particle's own body, truncated to an int."""
        return int(self.body.circle.radius)

    def update(self) -> None:
        """Apply the accumulated force, move, and reset force and acceleration."""
        self.acceleration += self.force
        self.velocity += self.acceleration
        self.center_of_mass += self.velocity
        self.center += self.velocity

        first = self.bodies[0].circle
        first.position = self.center - Vector(first.radius, first.radius)

        for body in self.bodies[1:]:
            shift = body.parent.circle.radius - body.circle.radius
            body.circle.position = self.center + Vector(shift, shift)

        self.force = Vector()
        self.acceleration = Vector()

    def absorb(self, other: Particle) -> Particle:
        """Attach ``other`` to this particle, conserving momentum."""
        distance = self.radius() + other.radius()
        theta = math.atan2(self.center.y - other.center.y, self.center.x - other.center.x)

        momentum = other.velocity * other.mass + self.velocity * self.mass
        velocity = momentum / (other.mass + self.mass)

        attached = other.body
        attached.body_center = self.center + Vector(
            distance * math.cos(theta), distance * math.sin(theta)
        )
        attached.parent = self.body
        other_radius = other.radius()
        attached.circle.position = attached.body_center - Vector(other_radius, other_radius)
        attached.x_offset = int(attached.body_center.x - self.center.x)
        attached.y_offset = int(attached.body_center.y - self.center.y)

        self.mass += other.mass
        self.velocity = velocity

        self.bodies.append(_copy_body(attached))
        self.bodies[0].circle.fill_color = RED
        return self