import pytest

from rcutil.environment import cli_get_option, cli_option_exist, get_env, get_home_dir
from rcutil.errors import InvalidArgumentError


def test_get_env_set(monkeypatch):
    monkeypatch.setenv("RCUTIL_TEST_VARIABLE", "some value")
    assert get_env("RCUTIL_TEST_VARIABLE") == "some value"


def test_get_env_unset_is_empty(monkeypatch):
    monkeypatch.delenv("RCUTIL_TEST_VARIABLE", raising=False)
    assert get_env("RCUTIL_TEST_VARIABLE") == ""


def test_get_env_none_name():
    with pytest.raises(InvalidArgumentError):
        get_env(None)


def test_get_home_dir_from_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/someone")
    assert get_home_dir() == "/home/someone"


def test_get_home_dir_missing(monkeypatch):
    monkeypatch.setenv("HOME", "")
    monkeypatch.delenv("USERPROFILE", raising=False)
    assert get_home_dir() is None


def test_cli_option_exist():
    args = ["prog", "--verbose", "--name", "node"]
    assert cli_option_exist(args, "--verbose")
    assert not cli_option_exist(args, "--verb")
    assert not cli_option_exist([], "--verbose")


def test_cli_get_option_returns_following_argument():
    args = ["prog", "--name", "node", "--other"]
    assert cli_get_option(args, "--name") == "node"


def test_cli_get_option_matches_prefix():
    args = ["prog", "--name=ignored", "node"]
    assert cli_get_option(args, "--name") == "node"


def test_cli_get_option_last_argument():
    assert cli_get_option(["prog", "--name"], "--name") is None


def test_cli_get_option_missing():
    assert cli_get_option(["prog", "--other", "value"], "--name") is None