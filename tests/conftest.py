"""
Pytest configuration for paramcoerce tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
# This allows tests to run without requiring a configured .env file
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("DEFAULT_PARAMETER_LOCATION", "header")


@pytest.fixture
def integer_schema():
    """Factory for integer ParameterSchema instances from JSON-Schema style dicts."""
    from paramcoerce.schemas.parameters import ParameterSchema

    def build(**fields):
        return ParameterSchema.model_validate({"type": "integer", **fields})

    return build
