import pytest

from bombo.app import build_parser, settings_from_args
from bombo.core.settings import Settings, env_bool, env_int, make_rng


def test_env_int(monkeypatch):
    monkeypatch.setenv("BOMBO_TEST_INT", " 42 ")
    assert env_int("BOMBO_TEST_INT") == 42
    monkeypatch.setenv("BOMBO_TEST_INT", "x")
    assert env_int("BOMBO_TEST_INT", 7) == 7
    monkeypatch.delenv("BOMBO_TEST_INT")
    assert env_int("BOMBO_TEST_INT") is None


@pytest.mark.parametrize("raw,expected", [("1", True), ("sí", True), ("off", False), ("", True)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("BOMBO_TEST_BOOL", raw)
    assert env_bool("BOMBO_TEST_BOOL", True) is expected


def test_make_rng_uses_configured_seed():
    rng = make_rng(Settings(seed=5))
    assert rng.seed == 5
    assert make_rng(Settings(seed=5)).uniform(1, 1000) == rng.uniform(1, 1000)


def test_cli_flags_override_settings():
    args = build_parser().parse_args(["--seed", "9", "--no-animation", "--no-pause", "--log-level", "debug"])
    cfg = settings_from_args(args, Settings(seed=None, animation=True, pause=True))
    assert cfg.seed == 9
    assert cfg.animation is False
    assert cfg.pause is False
    assert cfg.log_level == "DEBUG"


def test_no_flags_keep_base_settings():
    base = Settings(seed=3, animation=True, pause=True)
    cfg = settings_from_args(build_parser().parse_args([]), base)
    assert cfg == base
