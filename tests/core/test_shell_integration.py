from __future__ import annotations

import pytest

from envpick.core.shell import render_integration


@pytest.mark.parametrize("shell", ["zsh", "bash"])
def test_integration_script(shell: str) -> None:
    script = render_integration(shell)

    assert script.startswith(f"# envpick {shell} integration\n")
    assert "{{" not in script and "{%" not in script
    assert 'eval "$(envpick env 2>/dev/null)"' in script
    assert "ep() {" in script
    assert 'if envpick use "$@"; then' in script
    assert 'eval "$(envpick env select "$@")"' in script
    assert 'envpick "$@"' in script


def test_unsupported_shell() -> None:
    with pytest.raises(ValueError):
        render_integration("fish")


def test_zsh_completion_needs_compinit() -> None:
    script = render_integration("zsh")

    assert "(( $+functions[compdef] ))" in script
    assert 'eval "$(register-python-argcomplete --shell zsh envpick)"' in script


def test_bash_completion() -> None:
    script = render_integration("bash")

    assert 'eval "$(register-python-argcomplete envpick)"' in script
    assert "--shell zsh" not in script
    assert "compdef" not in script
