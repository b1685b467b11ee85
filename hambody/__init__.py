"""
This initialization file serves as the main entry point for the hambody package,
exposing its public API through a clean namespace.

It re-exports the configuration and value types (SimConfig, Body, State, System,
Trajectory), the Hamiltonian gradients (Hp, Hq, hamiltonian_gradients), the energy
functions, the integrator and its functional entry points (integrate, stormer, euler),
diagnostics, initial-condition generators and presets, trajectory export and the
matplotlib plotting helpers. A NullHandler is attached to the package logger so library
use stays silent unless the application configures logging.
"""

import logging

from .errors import ConfigurationError
from .sim_config import SimConfig
from .body import Body
from .simulation_state import State, System, Trajectory, build_state, reverse_state
from .simulation_validator import SimulationValidator

from .geometry_cache import geometry_buffers
from .forces import Hp, Hq, pairwise_terms, hamiltonian_gradients, gravitational_force
from .potential import kinetic_energy, potential_energy, total_energy
from .physics_utils import (
    remove_center_of_mass_velocity,
    total_momentum,
    center_of_mass,
    angular_momentum,
)

from .integration_scheme_base import IntegrationScheme
from .verlet_scheme import VerletScheme
from .euler_scheme import EulerScheme
from .integrator import Integrator, integrate, stormer, euler

from .diagnostics import Diagnostics
from .initial_condition_generator import (
    InitialConditionGenerator,
    GeneratorConfig,
    BodyOverride,
    generate_particles,
)
from .specialized_generators import SpecializedGenerators
from .presets import outer_solar_system, two_body_test, central_pair_cloud, SOLAR_SYSTEM_G
from .trajectory_io import save_trajectory, load_trajectory

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "ConfigurationError",
    "SimConfig",
    "Body",
    "State",
    "System",
    "Trajectory",
    "build_state",
    "reverse_state",
    "SimulationValidator",
    "geometry_buffers",
    "Hp",
    "Hq",
    "pairwise_terms",
    "hamiltonian_gradients",
    "gravitational_force",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "remove_center_of_mass_velocity",
    "total_momentum",
    "center_of_mass",
    "angular_momentum",
    "IntegrationScheme",
    "VerletScheme",
    "EulerScheme",
    "Integrator",
    "integrate",
    "stormer",
    "euler",
    "Diagnostics",
    "InitialConditionGenerator",
    "GeneratorConfig",
    "BodyOverride",
    "generate_particles",
    "SpecializedGenerators",
    "outer_solar_system",
    "two_body_test",
    "central_pair_cloud",
    "SOLAR_SYSTEM_G",
    "save_trajectory",
    "load_trajectory",
]
