"""Shared markers for shortstring tests."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive sweeps over a whole value range")
