"""
Pytest fixtures for the calculator tests
"""
import logging

import pytest

from parttime_training_duration.models import FormValues


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Show engine debug records only when a test fails."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    yield


@pytest.fixture
def baseline_form() -> FormValues:
    """40 h full-time, 30 h part-time, 36 months, no reductions."""
    return FormValues(
        weekly_full=40,
        weekly_part=30,
        full_duration_months=36,
    )
