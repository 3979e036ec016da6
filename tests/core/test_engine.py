from __future__ import annotations

import pytest

from envpick.core.config import StateStore
from envpick.core.engine import Option
from envpick.core.exceptions import ConfigNotFoundError, StateWriteError
from helpers.fixtures import BASIC_CONFIG, LEGACY_STATE, NAMESPACE_CONFIG, NEW_STATE_MULTI


def test_no_current_config_initially(envpick_env) -> None:
    envpick_env.write_config(BASIC_CONFIG)
    engine = envpick_env.engine()

    assert engine.current() == ""
    assert engine.current_full() == ""


def test_set_current_persists_immediately(envpick_env) -> None:
    envpick_env.write_config(BASIC_CONFIG)
    engine = envpick_env.engine()

    engine.set_current("prod")

    assert engine.current() == "prod"
    assert envpick_env.read_state() == {"current": {"": "prod"}}
    assert envpick_env.engine().current() == "prod"


def test_set_current_in_namespace_keeps_other_namespaces(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    envpick_env.write_state(NEW_STATE_MULTI)
    engine = envpick_env.engine("db")

    engine.set_current("prod")

    assert engine.current_full() == "db.prod"
    assert envpick_env.read_state() == {"current": {"": "prod", "db": "prod"}}


def test_set_current_unknown_leaves_state_untouched(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    envpick_env.write_state(NEW_STATE_MULTI)
    before = envpick_env.read_state_text()
    engine = envpick_env.engine("db")

    with pytest.raises(ConfigNotFoundError) as excinfo:
        engine.set_current("staging")

    assert excinfo.value.context == {"name": "staging", "namespace": "db"}
    assert engine.current() == "local"
    assert envpick_env.read_state_text() == before


def test_set_current_rejects_config_from_other_namespace(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    engine = envpick_env.engine("db")

    with pytest.raises(ConfigNotFoundError):
        engine.set_current("dev")


def test_failed_save_rolls_back_memory(envpick_env, monkeypatch) -> None:
    envpick_env.write_config(BASIC_CONFIG)
    envpick_env.write_state('[current]\n"" = "dev"\n')
    engine = envpick_env.engine()

    def _fail(self, state):
        raise StateWriteError("disk full")

    monkeypatch.setattr(StateStore, "save", _fail)

    with pytest.raises(StateWriteError):
        engine.set_current("prod")
    assert engine.current() == "dev"


def test_failed_first_save_leaves_namespace_unset(envpick_env, monkeypatch) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    engine = envpick_env.engine("db")

    def _fail(self, state):
        raise StateWriteError("disk full")

    monkeypatch.setattr(StateStore, "save", _fail)

    with pytest.raises(StateWriteError):
        engine.set_current("local")
    assert engine.current() == ""
    assert not envpick_env.state_path.exists()


def test_current_full_adds_namespace(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    envpick_env.write_state(NEW_STATE_MULTI)

    assert envpick_env.engine().current_full() == "prod"
    assert envpick_env.engine("db").current_full() == "db.local"


def test_legacy_state_visible_through_engine(envpick_env) -> None:
    envpick_env.write_config(BASIC_CONFIG)
    envpick_env.write_state(LEGACY_STATE)

    assert envpick_env.engine().current() == "dev"


def test_options_mark_active_in_document_order(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    envpick_env.write_state(NEW_STATE_MULTI)

    assert envpick_env.engine().options() == [Option("dev"), Option("prod", active=True)]
    assert envpick_env.engine("db").options() == [Option("local", active=True), Option("prod")]
    assert envpick_env.engine("cache").options() == []


def test_resolve_builds_full_name(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)

    assert envpick_env.engine().resolve("dev") == "dev"
    assert envpick_env.engine("db").resolve("local") == "db.local"
    with pytest.raises(ConfigNotFoundError):
        envpick_env.engine("db").resolve("dev")


def test_exports_and_web_url(envpick_env) -> None:
    envpick_env.write_config(
        """
        [dev]
        API_URL = "http://localhost:3000"
        _web_url = "http://localhost:3000/admin"
        """
    )
    engine = envpick_env.engine()

    assert engine.exports("dev") == ['export API_URL="http://localhost:3000"']
    assert engine.web_url("dev") == "http://localhost:3000/admin"


def test_for_namespace_shares_state(envpick_env) -> None:
    envpick_env.write_config(NAMESPACE_CONFIG)
    default = envpick_env.engine()
    db = default.for_namespace("db")

    db.set_current("prod")
    default.set_current("dev")

    assert db.namespace == "db"
    assert envpick_env.read_state() == {"current": {"": "dev", "db": "prod"}}
