"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator over arbitrary-precision integers."""
    from numcalc import Calculator

    return Calculator()


@pytest.fixture
def uint64_calculator():
    """Provide a Calculator evaluating in 64-bit unsigned integers."""
    from numcalc import UINT64, Calculator

    return Calculator(UINT64)

