"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def predictable_random_numbers():
    """Seed numpy's global random generator at the start of each test.

    Random sphere colors come from this generator. Tests may still not assume
    that two generated spheres have the same colors.
    """
    np.random.seed(0)


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """Turn numpy floating point warnings into errors.

    Generators must not divide by zero or overflow for valid input, and
    tests must not hide such problems.
    """
    np.seterr(all="raise")
