from __future__ import annotations
from dataclasses import dataclass, replace
import math
import sys

from .errors import ConfigurationError

"""
This configuration module defines the run parameters of an integration through the SimConfig dataclass. Required parameters are the step size dt and the horizon tmax; optional ones are the gravitational constant G and the minimum-separation floor softening (both left unset by default, in which case resolve takes them from the System, whose defaults are 1.0 and 0.0; a value that disagrees with the System is rejected), the dimensionality, the integration scheme and whether a finished run is checked for non-finite values. The class derives the number of stored time indices, validates itself and provides copy/with_overrides helpers for configuration inheritance.

"""

_ALLOWED_SCHEMES = {
    "verlet",
    "euler",
}

_ALLOWED_DIMENSIONS = (2, 3)


@dataclass(frozen=True)
class SimConfig:
    dt: float
    tmax: float
    G: float | None = None
    softening: float | None = None
    dimension: int | None = None
    scheme: str = "verlet"
    check_finite: bool = True

    @property
    def tnum(self) -> int:
        ratio = self.tmax / self.dt
        nearest = round(ratio)
        # a quotient a few ulps off an integer (100/0.001) counts as that integer
        if abs(ratio - nearest) <= 4.0 * sys.float_info.epsilon * max(1.0, abs(ratio)):
            return int(nearest) + 1
        return int(math.floor(ratio)) + 1

    def validate(self) -> "SimConfig":
        if not math.isfinite(self.dt) or self.dt <= 0.0:
            raise ConfigurationError(f"dt must be positive and finite, got {self.dt}")
        if not math.isfinite(self.tmax) or self.tmax <= 0.0:
            raise ConfigurationError(f"tmax must be positive and finite, got {self.tmax}")
        if self.G is not None and (not math.isfinite(self.G) or self.G <= 0.0):
            raise ConfigurationError(f"G must be positive and finite, got {self.G}")
        if self.softening is not None and (not math.isfinite(self.softening) or self.softening < 0.0):
            raise ConfigurationError(f"softening must be non-negative, got {self.softening}")
        if self.dimension is not None and self.dimension not in _ALLOWED_DIMENSIONS:
            raise ConfigurationError(
                f"dimension must be one of {_ALLOWED_DIMENSIONS}, got {self.dimension}"
            )
        if self.scheme not in _ALLOWED_SCHEMES:
            raise ConfigurationError(
                f"scheme must be one of {sorted(_ALLOWED_SCHEMES)}, got {self.scheme!r}"
            )
        return self

    def copy(self) -> "SimConfig":
        return replace(self)

    def with_overrides(self, **kwargs) -> "SimConfig":
        return replace(self, **kwargs)

    def resolve(self, system) -> "SimConfig":
        values = {}
        for name in ("G", "softening"):
            own = getattr(self, name)
            theirs = float(getattr(system, name))
            if own is not None and float(own) != theirs:
                raise ConfigurationError(
                    f"configured {name}={own} conflicts with the system's {name}={theirs}"
                )
            values[name] = theirs
        return replace(self, **values).validate()
