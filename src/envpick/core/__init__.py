"""Core library for envpick (configuration model, state, engine, launchers)."""
