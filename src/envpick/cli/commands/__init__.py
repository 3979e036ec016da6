"""Top-level envpick commands (auto-discovered by the dispatcher)."""
