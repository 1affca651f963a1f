"""
Tests for input validation: field presence, bounds and check order.
"""

import pytest

from sitegen.core.errors import ErrorKind, ValidationError
from sitegen.core.validator import validate_input


def _payload(**overrides):
    data = {
        "name": "Acme",
        "industry": "Retail",
        "audience": "Shoppers",
        "color": "blue",
        "sections": ["About"],
    }
    data.update(overrides)
    return data


class TestValidateInput:

    def test_valid_payload_builds_request(self):
        req = validate_input(_payload())
        assert req.name == "Acme"
        assert req.sections == ("About",)
        assert req.color == "blue"

    @pytest.mark.parametrize("data", [None, [], "Acme", 42])
    def test_non_object_rejected(self, data):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_input(data)

    @pytest.mark.parametrize("field", ["name", "industry", "audience"])
    def test_missing_required_field_is_named(self, field):
        data = _payload()
        del data[field]
        with pytest.raises(ValidationError) as exc:
            validate_input(data)
        assert f"'{field}'" in str(exc.value)
        assert exc.value.kind == ErrorKind.VALIDATION

    @pytest.mark.parametrize("value", ["", "   ", 5, None, ["Acme"]])
    def test_blank_or_wrong_type_name_rejected(self, value):
        with pytest.raises(ValidationError, match="'name'"):
            validate_input(_payload(name=value))

    def test_missing_audience_message_identifies_audience(self):
        data = _payload()
        del data["audience"]
        with pytest.raises(ValidationError, match="audience"):
            validate_input(data)

    def test_name_boundary(self):
        assert validate_input(_payload(name="n" * 100)).name == "n" * 100
        with pytest.raises(ValidationError, match="'name'.*too long"):
            validate_input(_payload(name="n" * 101))

    def test_industry_and_audience_bounds(self):
        validate_input(_payload(industry="i" * 100, audience="a" * 200))
        with pytest.raises(ValidationError, match="'industry'"):
            validate_input(_payload(industry="i" * 101))
        with pytest.raises(ValidationError, match="'audience'"):
            validate_input(_payload(audience="a" * 201))

    def test_color_bound_only_when_present(self):
        validate_input(_payload(color="c" * 50))
        with pytest.raises(ValidationError, match="'color'"):
            validate_input(_payload(color="c" * 51))

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_color_normalised_to_none(self, value):
        assert validate_input(_payload(color=value)).color is None
        data = _payload()
        del data["color"]
        assert validate_input(data).color is None

    def test_sections_must_be_array(self):
        with pytest.raises(ValidationError, match="'sections' must be an array"):
            validate_input(_payload(sections="About, Contact"))
        data = _payload()
        del data["sections"]
        with pytest.raises(ValidationError, match="'sections'"):
            validate_input(data)

    def test_empty_sections_pass_without_defaults(self):
        req = validate_input(_payload(sections=[]))
        assert req.sections == ()

    def test_section_count_boundary(self):
        assert len(validate_input(_payload(sections=["About"] * 10)).sections) == 10
        with pytest.raises(ValidationError, match="too many 'sections'"):
            validate_input(_payload(sections=["About"] * 11))

    def test_non_string_section_rejected(self):
        with pytest.raises(ValidationError, match="entries must be strings"):
            validate_input(_payload(sections=["About", 3]))

    def test_unknown_sections_are_accepted(self):
        req = validate_input(_payload(sections=["Blog", "About"]))
        assert req.sections == ("Blog", "About")

    def test_check_order_is_fail_fast(self):
        # both audience missing and name too long: presence checks come first
        data = _payload(name="n" * 150)
        del data["audience"]
        with pytest.raises(ValidationError, match="'audience'"):
            validate_input(data)

        # sections type is checked before any length bound
        with pytest.raises(ValidationError, match="'sections'"):
            validate_input(_payload(name="n" * 150, sections=None))

    def test_request_is_immutable(self):
        req = validate_input(_payload())
        with pytest.raises(Exception):
            req.name = "Other"

    def test_input_is_not_mutated(self):
        data = _payload(sections=[])
        validate_input(data)
        assert data["sections"] == []
