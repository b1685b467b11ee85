"""
This module provides named initial-condition presets, each returning a fresh System and
initial State so no mutable tables are shared between runs.

outer_solar_system reproduces the outer planets data set of Hairer, Lubich and Wanner,
"Geometric Numerical Integration" (2006): the Sun with the inner planets folded into its
mass, Jupiter, Saturn, Uranus, Neptune and Pluto, in solar masses, astronomical units and
days, without softening. two_body_test is a pair of equal light bodies on a slow mutual
orbit. central_pair_cloud is a random particle cloud with a rotational velocity field
and two heavy bodies pinned near the centre.
"""

from __future__ import annotations
from typing import Optional, Tuple

from .body import Body
from .initial_condition_generator import BodyOverride, GeneratorConfig, InitialConditionGenerator
from .simulation_state import State, System, build_state

# AU^3 / (solar mass * day^2)
SOLAR_SYSTEM_G = 2.95912208286e-4

_OUTER_PLANETS = (
	("Sun", 1.00000597682,
		(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
	("Jupiter", 0.000954786104043,
		(-3.5023653, -3.8169847, -1.5507963), (0.00565429, -0.00412490, -0.00190589)),
	("Saturn", 0.000285583733151,
		(9.0755314, -3.0458353, -1.6483708), (0.00168318, 0.00483525, 0.00192462)),
	("Uranus", 0.0000437273164546,
		(8.3101420, -16.2901086, -7.2521278), (0.00354178, 0.00137102, 0.00055029)),
	("Neptune", 0.0000517759138449,
		(11.4707666, -25.7294829, -10.8169456), (0.00288930, 0.00114527, 0.00039677)),
	("Pluto", 1.0 / 1.3e8,
		(-15.5387357, -25.2225594, -3.1902382), (0.00276725, -0.00170702, -0.00136504)),
)


def outer_solar_system() -> Tuple[System, State]:
	bodies = [
		Body.from_velocity(mass, pos, vel, label=name)
		for name, mass, pos, vel in _OUTER_PLANETS
	]
	return build_state(bodies, G=SOLAR_SYSTEM_G, softening=0.0)


def two_body_test(mass: float = 0.1, momentum: float = 1.0e-4, G: float = 0.1) -> Tuple[System, State]:
	return build_state(
		masses=[mass, mass],
		positions=[[0.0, 1.0], [1.0, 0.0]],
		momenta=[[0.0, -momentum], [0.0, momentum]],
		G=G,
		softening=0.0,
	)


def _rotational_field(x: float, y: float):
	return (-y, x)


def central_pair_cloud(
	n_bodies: int = 20,
	*,
	box: float = 2000.0,
	heavy_mass: float = 1000.0,
	heavy_separation: float = 1000.0,
	momentum_scale: float = 1.0e-3,
	softening: float = 0.0,
	seed: Optional[int] = None,
) -> Tuple[System, State]:
	cfg = GeneratorConfig(
		xmax=box,
		ymax=box,
		mmax=5.0,
		vmax=1.0,
		velocity_field=_rotational_field,
		momentum_scale=momentum_scale,
		overrides=[
			BodyOverride(0, mass=heavy_mass, position=(0.0, 0.0)),
			BodyOverride(1, mass=heavy_mass, position=(heavy_separation, 0.0)),
		],
		G=1.0,
		softening=softening,
		seed=seed,
	)
	return InitialConditionGenerator(cfg).create_state(n_bodies)
