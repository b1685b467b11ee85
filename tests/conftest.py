import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from hambody import SpecializedGenerators, build_state, GeneratorConfig, InitialConditionGenerator


@pytest.fixture
def kepler_pair():
    m, q, v = SpecializedGenerators.generate_kepler_pair(m1=1.0, m2=1.0e-10, separation=1.0, G=1.0)
    system, state = build_state(masses=m, positions=q, velocities=v, G=1.0)
    period = SpecializedGenerators.kepler_period(1.0, 1.0, 1.0e-10, G=1.0)
    return system, state, period


@pytest.fixture
def eccentric_pair():
    # 0.8 x circular speed: e = 0.36, pericentre ~0.47, period ~3.96
    m = np.array([1.0, 1.0e-6])
    q = np.array([[0.0, 0.0], [1.0, 0.0]])
    v = np.array([[0.0, 0.0], [0.0, 0.8]])
    return build_state(masses=m, positions=q, velocities=v, G=1.0)


@pytest.fixture
def softened_cloud():
    cfg = GeneratorConfig(xmax=4.0, ymax=4.0, zmax=4.0, mmin=0.5, mmax=1.5, vmax=0.2,
                          softening=0.1, seed=1234)
    return InitialConditionGenerator(cfg).create_state(8)
