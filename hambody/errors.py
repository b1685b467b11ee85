"""
This module defines the exception raised for invalid simulation input.

ConfigurationError is raised before an integration run starts whenever the step size,
horizon, masses, array shapes, gravitational constant or softening floor describe a
configuration the engine refuses to run. It subclasses ValueError so callers that
already catch ValueError keep working.
"""


class ConfigurationError(ValueError):
	pass
