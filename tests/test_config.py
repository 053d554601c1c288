import importlib

import pytest

from shamir_recover.config import RecoveryPolicy
from shamir_recover.interpolation import DEFAULT_PRIME


def test_policy_defaults():
    policy = RecoveryPolicy()
    assert policy.prime == DEFAULT_PRIME == 2**521 - 1
    assert policy.lenient is False


def test_policy_rejects_bad_prime():
    with pytest.raises(ValueError):
        RecoveryPolicy(prime=2)
    with pytest.raises(ValueError):
        RecoveryPolicy(prime=True)


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHAMIR_RECOVER_PRIME", str(2**127 - 1))
    monkeypatch.setenv("SHAMIR_RECOVER_LENIENT", "yes")

    config_module = importlib.import_module("shamir_recover.config")
    reloaded = importlib.reload(config_module)

    try:
        assert reloaded.policy.prime == 2**127 - 1
        assert reloaded.policy.lenient is True
    finally:
        monkeypatch.delenv("SHAMIR_RECOVER_PRIME", raising=False)
        monkeypatch.delenv("SHAMIR_RECOVER_LENIENT", raising=False)
        importlib.reload(config_module)


@pytest.mark.parametrize("value", ["not-a-number", "1", "-7"])
def test_invalid_prime_override_falls_back(monkeypatch, value):
    from shamir_recover.config import load_policy

    monkeypatch.setenv("SHAMIR_RECOVER_PRIME", value)
    assert load_policy().prime == DEFAULT_PRIME


def test_lenient_flag_parsing(monkeypatch):
    from shamir_recover.config import load_policy

    monkeypatch.setenv("SHAMIR_RECOVER_LENIENT", "0")
    assert load_policy().lenient is False
    monkeypatch.setenv("SHAMIR_RECOVER_LENIENT", "On")
    assert load_policy().lenient is True
