"""
envpick init command group.

SUMMARY: Generate shell configuration for envpick

Generates shell integration config (auto-loading and the `ep` helper):

    eval "$(envpick init zsh)"   # Add to ~/.zshrc
    source ~/.zshrc              # Reload shell
"""

SUMMARY = "Generate shell configuration for envpick"
