"""Test the examples shown in the README."""

import logging

import pytest

import presence
from presence import NoPresentValueError, missing


def test_usage():
    """Test the usage section."""
    assert presence.is_present(0)
    assert presence.is_absent(missing)

    assert presence.or_else(None, "default") == "default"
    assert presence.or_else_supply(None, lambda: "computed") == "computed"
    assert presence.map(5, lambda x: x + 1) == 6
    assert presence.filter(0, None, False, missing, "") == [0, False, ""]


def test_resolving_an_option():
    """Test resolving an option from prioritized sources."""
    cli_args: dict[str, int] = {}
    env_port = None
    file_config = {"port": 8080}

    port = presence.resolve(cli_args.get("port"), env_port, file_config.get("port"))
    assert port == 8080

    with pytest.raises(NoPresentValueError):
        presence.resolve(cli_args.get("port"), env_port)


def test_raising_on_absence():
    """Test or_else_throw with and without a factory."""
    users = {1: "ada"}

    assert presence.or_else_throw(users.get(1), lambda: KeyError(1)) == "ada"

    with pytest.raises(KeyError):
        presence.or_else_throw(users.get(2), lambda: KeyError(2))

    with pytest.raises(presence.AbsentValueError):
        presence.or_else_throw(users.get(2))


def test_callbacks():
    """Test inspect with keyword callbacks."""
    stored: list[str] = []
    requests: list[bool] = []

    token = presence.inspect(
        "abc", on_present=stored.append, on_absent=lambda: requests.append(True)
    )
    presence.inspect(
        None, on_present=stored.append, on_absent=lambda: requests.append(True)
    )

    assert token == "abc"
    assert stored == ["abc"]
    assert requests == [True]


def test_logging():
    """Test the logging section."""
    presence.set_verbosity(logging.DEBUG)
    try:
        assert presence.get_presence_logger().level == logging.DEBUG
    finally:
        presence.set_verbosity(logging.INFO)


if __name__ == "__main__":
    test_usage()
    test_resolving_an_option()
    test_raising_on_absence()
    test_callbacks()
    test_logging()
    print("All tests passed successfully.")
