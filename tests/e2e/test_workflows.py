"""End-to-end workflows driven through the CLI entry point."""
from __future__ import annotations

import pytest

from envpick.cli._dispatcher import main
from helpers.fixtures import LEGACY_STATE, MULTI_NAMESPACE_CONFIG, NAMESPACE_CONFIG


def _run(capsys, *argv: str) -> tuple[int, str, str]:
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_switch_then_export_in_new_shell(envpick_env, capsys) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)

    code, _, _ = _run(capsys, "use", "prod")
    assert code == 0

    code, out, _ = _run(capsys, "env")
    assert code == 0
    assert out == 'export API_URL="https://api.example.com"\nexport ENV="production"\n'


def test_namespaces_are_switched_independently(envpick_env, capsys) -> None:
    envpick_env.write_config(MULTI_NAMESPACE_CONFIG)

    assert _run(capsys, "use", "dev")[0] == 0
    assert _run(capsys, "-n", "db", "use", "prod")[0] == 0
    assert _run(capsys, "-n", "deploy", "use", "gcp")[0] == 0

    assert envpick_env.read_state() == {"current": {"": "dev", "db": "prod", "deploy": "gcp"}}
    assert _run(capsys, "env")[1] == 'export ENV="development"\n'
    assert _run(capsys, "-n", "db", "env")[1] == 'export DB_HOST="prod-db.example.com"\n'
    assert _run(capsys, "-n", "deploy", "env")[1] == (
        'export CLOUD="gcp"\nexport REGION="us-central1"\n'
    )


def test_temporary_selection_leaves_persistent_choice(envpick_env, capsys) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    _run(capsys, "use", "dev")

    code, out, _ = _run(capsys, "env", "select", "prod")
    assert code == 0
    assert 'export ENV="production"' in out

    assert _run(capsys, "env")[1].endswith('export ENV="development"\n')


def test_legacy_state_upgraded_on_next_switch(envpick_env, capsys) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    envpick_env.write_state(LEGACY_STATE)

    code, out, _ = _run(capsys, "env")
    assert code == 0
    assert 'export ENV="development"' in out

    assert _run(capsys, "-n", "db", "use", "local")[0] == 0
    assert envpick_env.read_state() == {"current": {"": "dev", "db": "local"}}


def test_config_edit_is_picked_up(envpick_env, capsys) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    _run(capsys, "use", "dev")

    envpick_env.write_config(
        """
        [dev]
        API_URL = "http://127.0.0.1:4000"
        """
    )

    assert _run(capsys, "env")[1] == 'export API_URL="http://127.0.0.1:4000"\n'


def test_removed_config_is_reported(envpick_env, capsys) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    _run(capsys, "use", "prod")
    envpick_env.write_config('[dev]\nENV = "development"\n')

    code, out, err = _run(capsys, "env")

    assert code == 1
    assert out == ""
    assert 'configuration "prod" not found' in err


@pytest.mark.parametrize("flag", ["--config-dir", None])
def test_config_dir_flag_and_environment(envpick_env, capsys, tmp_path, flag) -> None:
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    (elsewhere / "config.toml").write_text('[solo]\nA = "b"\n', encoding="utf-8")
    envpick_env.write_config('[dev]\nA = "env"\n')

    if flag:
        code, out, _ = _run(capsys, flag, str(elsewhere), "env", "select", "solo")
        assert out == 'export A="b"\n'
    else:
        code, out, _ = _run(capsys, "env", "select", "dev")
        assert out == 'export A="env"\n'
    assert code == 0
