"""Particle simulation loop and window."""

from __future__ import annotations

import argparse
import random

from particlesim.particle import Particle
from particlesim.physics import check_collision, gravity

WIDTH = 1920
HEIGHT = 1080
FRAME_RATE = 60
DEFAULT_COUNT = 50


def build_particles(count, rng=None):
    """Return ``count`` particles at random positions with random size and mass."""
    rng = rng if rng is not None else random.Random()
    particles = []
    for _ in range(count):
        radius = rng.randint(8, 10)
        mass = rng.randint(10, 20)
        xpos = rng.randint(100, 1820)
        ypos = rng.randint(100, 980)
        particles.append(Particle(radius, mass, xpos, ypos))
    return particles


def step(particles):
    """Advance the simulation one frame, merging colliding particles in place."""
    # Indices are used deliberately: the list shrinks while it is walked,
    # and the pairing order decides which particle absorbs which.
    i = 0
    while i < len(particles):
        j = 0
        while j < len(particles):
            if j != i:
                current = particles[i]
                other = particles[j]
                current.force += gravity(current, other)
                if check_collision(current, other):
                    current.absorb(other)
                    del particles[j]
            j += 1
        i += 1

    for particle in particles:
        particle.update()
    return particles


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="particlesim", description="Gravitating particles.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="number of particles")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv=None):
    """Open a window and run the simulation until it is closed."""
    args = _parse_args(argv)
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Particles")
        clock = pygame.time.Clock()

        particles = build_particles(args.count, random.Random(args.seed))
        display_data = False
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYUP:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_v:
                        display_data = not display_data
            if not running:
                break

            step(particles)

            screen.fill((0, 0, 0))
            for particle in particles:
                for body in particle.bodies:
                    circle = body.circle
                    center = circle.center()
                    pygame.draw.circle(
                        screen, circle.fill_color, (center.x, center.y), circle.radius
                    )
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0