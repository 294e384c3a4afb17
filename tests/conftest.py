"""Pytest configuration and fixtures for mirrorpad tests."""

import numpy as np
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "shape: pad specs and output shapes")
    config.addinivalue_line("markers", "tree: mirror tree construction and binding")
    config.addinivalue_line(
        "markers", "padding: mirror selection and flattened output values"
    )
    config.addinivalue_line("markers", "dtypes: element type support")
    config.addinivalue_line("markers", "errors: error taxonomy and diagnostics")
    config.addinivalue_line("markers", "context: arena reuse across calls")
    config.addinivalue_line("markers", "op: prepare/eval operator life cycle")
    config.addinivalue_line("markers", "verify: comparison against jax.numpy.pad")


@pytest.fixture
def rng():
    """Seeded random generator for reproducible inputs."""
    return np.random.default_rng(0)
