"""Unit tests for mctree_src.util.config helper module."""

from mctree_src.util import config
from mctree_src.util.config import get_key, is_verbose


def test_get_key():
    assert get_key("logging.level") == "INFO", (
        "Expected to successfully read 'logging.level' from config.yaml."
    )


def test_get_key_missing_returns_default():
    assert get_key("search.does_not_exist", 7) == 7
    assert get_key("logging.level.too.deep", "x") == "x"


def test_seed_defaults_to_none():
    assert get_key("search.seed", 0) is None


def test_is_verbose(monkeypatch):
    monkeypatch.setitem(config.config, "logging", {"verbose": True})
    assert is_verbose() is True
    monkeypatch.setitem(config.config, "logging", {})
    assert is_verbose() is False
