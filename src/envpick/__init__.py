"""
envpick - switch between named sets of environment variables

envpick keeps groups of environment variables in a TOML file, remembers the
active group per namespace, and prints ``export`` statements for the shell
to evaluate.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
