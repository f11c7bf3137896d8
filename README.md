# particlesim

A small two-dimensional gravity simulation. A window fills with particles that
attract each other. When two particles touch, one absorbs the other. The result
keeps the combined mass and momentum, and its first body is drawn in red.

## Installation

```
pip install .
```

This also installs `pygame`, which the window uses.

## Running

```
particlesim
```

The window is 1920×1080 and runs at up to 60 frames per second. It starts
with 50 particles at random positions. Each particle gets a radius from 8 to 10
and a mass from 10 to 20.

Options:

- `--count N` sets the number of particles. The default is 50.
- `--seed S` seeds the random generator, so the starting layout can be repeated.

Keys:

- `Esc`, or closing the window, ends the simulation.
- `V` toggles a data-display flag. The window does not show any particle data
  yet, so pressing it changes nothing on screen.

## Using the library

The physics does not depend on the window, so you can use it on its own:

```python
import random

from particlesim.simulation import build_particles, step

particles = build_particles(50, random.Random(1))
for _ in range(100):
    step(particles)
print(len(particles), "particles remain")
```

The modules are:

- `particlesim.vector`: `Vector`, an immutable 2D vector. It supports `+`,
  `-`, unary `-`, and `/` by a number. `*` by a number scales the vector, `*` by
  another `Vector` gives the dot product, and `dot(other)` returns the dot
  product as well.
- `particlesim.particle`: `Circle`, `Body` and `Particle`.
  - `Circle` has a `position`, which is the top-left corner of its bounding box,
    and `center()`.
  - `Particle(radius, mass, xpos, ypos)` holds its bodies in `bodies`.
  - `update()` applies the accumulated force, moves the particle, and resets
    its force.
  - `absorb(other)` attaches `other`'s body, adds `other`'s mass and sets the
    velocity that conserves momentum.
- `particlesim.physics`: `GRAVITATIONAL_CONSTANT` (0.067), `square_distance`,
  `gravity`, `body_distance` and `check_collision`. `check_collision` compares
  only the first body of the first particle with the other particle.
- `particlesim.simulation`: `build_particles(count, rng=None)`,
  `step(particles)`, which advances one frame and removes absorbed particles
  from the list in place, and `main(argv=None)`, the function behind the
  `particlesim` command.

## Tests

```
pip install .[test]
pytest
```