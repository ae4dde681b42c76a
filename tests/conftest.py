"""
Pytest configuration and fixtures for linparam tests.
"""

import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


def pytest_configure(config):
    """Configure pytest."""
    # Register custom markers
    config.addinivalue_line(
        "markers", "threads: mark test as using several threads"
    )


@pytest.fixture
def lr_param():
    """Provide an L2R_LR parameter set with defaults."""
    from linparam import Parameter, SolverType
    
    return Parameter(SolverType.L2R_LR, C=1.0, eps=0.01)


@pytest.fixture
def weighted_param():
    """Provide a parameter set carrying class and rest weights."""
    from linparam import Parameter, SolverType
    
    param = Parameter(SolverType.L2R_L2LOSS_SVC, C=10.0, eps=0.001,
                      max_iters=500, p=0.2)
    param.set_weights([2.0, 3.0, 0.5], [1, 2, 3], [1.5, 1.0, 0.25])
    param.init_sol = [0.1, 0.2, 0.3, 0.4]
    return param
