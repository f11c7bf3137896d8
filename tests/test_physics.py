import math

from particlesim.particle import Particle
from particlesim.physics import (
    body_distance,
    check_collision,
    gravity,
    square_distance,
)


def test_gravity_magnitude_uses_gravitational_constant():
    a = Particle(5, 10, 0, 0)
    b = Particle(5, 10, 3, 4)
    force = gravity(a, b)
    assert math.isclose(math.hypot(force.x, force.y), 0.268)
    assert math.isclose(force.x, 0.1608)
    assert math.isclose(force.y, 0.2144)


def test_square_distance_pythagorean():
    a = Particle(5, 10, 0, 0)
    b = Particle(5, 10, 3, 4)
    assert square_distance(a, b) == 25


def test_square_distance_symmetric():
    a = Particle(5, 10, 10, 30)
    b = Particle(7, 10, 50, 90)
    assert square_distance(a, b) == square_distance(b, a)


def test_gravity_points_towards_other():
    a = Particle(5, 10, 0, 0)
    b = Particle(5, 10, 100, 0)
    force = gravity(a, b)
    assert force.x > 0
    assert abs(force.y) < 1e-12


def test_gravity_is_equal_and_opposite():
    a = Particle(5, 10, 10, 20)
    b = Particle(6, 17, 130, 90)
    fab = gravity(a, b)
    fba = gravity(b, a)
    assert math.isclose(fab.x, -fba.x)
    assert math.isclose(fab.y, -fba.y)


def test_gravity_scales_with_mass():
    a = Particle(5, 10, 0, 0)
    light = Particle(5, 10, 60, 80)
    heavy = Particle(5, 20, 60, 80)
    f1 = gravity(a, light)
    f2 = gravity(a, heavy)
    assert math.isclose(f2.x, 2 * f1.x)
    assert math.isclose(f2.y, 2 * f1.y)


def test_gravity_weakens_with_distance():
    a = Particle(5, 10, 0, 0)
    near = Particle(5, 10, 50, 0)
    far = Particle(5, 10, 100, 0)
    assert math.isclose(gravity(a, near).x, 4 * gravity(a, far).x)


def test_gravity_coincident_is_unbounded():
    a = Particle(5, 10, 0, 0)
    b = Particle(5, 10, 0, 0)
    assert gravity(a, b).x == math.inf


def test_body_distance_to_own_particle_is_zero():
    p = Particle(8, 10, 100, 200)
    assert body_distance(p.bodies[0].circle, p) == 0


def test_body_distance_matches_square_distance_for_fresh_particles():
    a = Particle(8, 10, 100, 200)
    b = Particle(8, 10, 130, 240)
    assert body_distance(a.bodies[0].circle, b) == int(square_distance(a, b))


def test_overlapping_particles_collide():
    a = Particle(10, 10, 100, 100)
    b = Particle(10, 10, 110, 100)
    assert check_collision(a, b) is True
    assert check_collision(b, a) is True


def test_touching_particles_collide():
    a = Particle(10, 10, 100, 100)
    b = Particle(10, 10, 120, 100)
    assert check_collision(a, b) is True


def test_distant_particles_do_not_collide():
    a = Particle(10, 10, 100, 100)
    b = Particle(10, 10, 300, 300)
    assert check_collision(a, b) is False