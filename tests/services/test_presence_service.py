"""
Tests for presence resolution (absent/blank values, defaults, required).
"""

import pytest

from paramcoerce.errors import MissingRequiredParameter
from paramcoerce.schemas.parameters import ParameterSchema
from paramcoerce.services.presence_service import is_blank, resolve_presence


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("raw", [None, ""])
    def test_blank(self, raw):
        assert is_blank(raw)

    @pytest.mark.parametrize("raw", [" ", "0", 0])
    def test_not_blank(self, raw):
        assert not is_blank(raw)


class TestResolvePresence:
    """Tests for resolve_presence."""

    def test_present_value_passes_through(self):
        presence = resolve_presence(ParameterSchema(), "12", "Test")

        assert presence.resolved is False
        assert presence.value == "12"

    def test_whitespace_is_not_blank(self):
        """Whitespace goes on to the coercer, which rejects it."""
        presence = resolve_presence(ParameterSchema(), "  ", "Test")

        assert presence.resolved is False

    def test_explicit_null_default_is_used(self):
        schema = ParameterSchema.model_validate({"type": "integer", "required": True, "default": None})

        presence = resolve_presence(schema, None, "Test")

        assert presence.resolved is True
        assert presence.value is None

    def test_optional_without_default(self):
        presence = resolve_presence(ParameterSchema(), "", "Test")

        assert presence.resolved is True
        assert presence.value is None

    def test_required_without_default(self):
        schema = ParameterSchema(required=True)

        with pytest.raises(MissingRequiredParameter) as exc_info:
            resolve_presence(schema, None, "X-Page-Size", "header")

        assert exc_info.value.error_code == "missing_required_parameter"
        assert exc_info.value.parameter == "X-Page-Size"
        assert str(exc_info.value) == 'Missing required header parameter "X-Page-Size"'
