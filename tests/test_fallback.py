"""
Tests for the local template generator.
"""

import re

import pytest

from sitegen.core.fallback import SECTION_BUILDERS, generate_fallback_site, section_marker
from sitegen.core.sanitizer import sanitize_code
from sitegen.core.theme import DEFAULT_PALETTE, resolve_palette
from sitegen.core.validator import validate_input


def _request(**overrides):
    data = {
        "name": "Acme",
        "industry": "Retail",
        "audience": "Shoppers",
        "color": "blue",
        "sections": ["About", "Contact"],
    }
    data.update(overrides)
    return validate_input(data)


class TestPalette:

    @pytest.mark.parametrize("hint,expected", [
        ("blue", ("#4F46E5", "#818CF8")),
        ("Deep PURPLE", ("#9333EA", "#C084FC")),
        ("sea green and sand", ("#10B981", "#34D399")),
        ("Red", ("#EF4444", "#F87171")),
        ("blue and red", ("#4F46E5", "#818CF8")),
        ("charcoal", DEFAULT_PALETTE),
        (None, DEFAULT_PALETTE),
        ("", DEFAULT_PALETTE),
    ])
    def test_resolve_palette(self, hint, expected):
        assert resolve_palette(hint) == expected


class TestFallbackSite:

    def test_deterministic(self):
        assert generate_fallback_site(_request()) == generate_fallback_site(_request())

    def test_shape_contract(self, acme_request):
        code = generate_fallback_site(acme_request)
        assert code.startswith("function App() {")
        assert code.endswith("}")
        assert "const h = React.createElement;" in code
        assert len(re.findall(r"\bfunction\s+\w+\s*\(", code)) == 1
        assert not re.search(r"\b(import|export|require)\b", code)

    def test_already_satisfies_sanitizer(self):
        every = _request(sections=list(SECTION_BUILDERS))
        code = generate_fallback_site(every)
        assert sanitize_code(code) == code

    def test_uses_palette_from_color_hint(self):
        code = generate_fallback_site(_request(color="green"))
        assert "const primaryColor = '#10B981';" in code
        assert "const accentColor = '#34D399';" in code

    @pytest.mark.parametrize("sections", [
        [],
        ["About"],
        ["Contact", "About"],
        ["Services", "Products", "Gallery"],
        list(SECTION_BUILDERS),
    ])
    def test_section_included_iff_requested(self, sections):
        code = generate_fallback_site(_request(sections=sections))
        for name in SECTION_BUILDERS:
            assert (section_marker(name) in code) == (name in sections)

    def test_unknown_sections_ignored(self):
        code = generate_fallback_site(_request(sections=["Blog", "Careers"]))
        assert "Blog" not in code
        assert "Careers" not in code
        assert "data-section" not in code

    def test_section_names_match_exactly(self):
        code = generate_fallback_site(_request(sections=["about", "CONTACT"]))
        assert "data-section" not in code

    def test_vocabulary_order_not_request_order(self):
        code = generate_fallback_site(_request(sections=["Contact", "About"]))
        assert code.index(section_marker("About")) < code.index(section_marker("Contact"))

    def test_about_region_names_the_business(self, acme_request):
        code = generate_fallback_site(acme_request)
        assert "About Acme" in code
        assert "Contact Us" in code
        assert "contact@acme.com" in code

    def test_user_text_is_escaped(self):
        code = generate_fallback_site(_request(name="Bob's </script><b>", sections=["About"]))
        assert "</script>" not in code
        assert "Bob's <\\/script><b>" in code
        # single-quoted JS literals are never opened by user text
        assert "'Bob's" not in code

    def test_industry_and_audience_flow_into_copy(self):
        code = generate_fallback_site(_request(industry="Bakery", audience="Locals", sections=["About"]))
        assert "Professional Bakery Services" in code
        assert "Serving Locals with excellence" in code

    def test_footer_year_is_computed_at_runtime(self, acme_request):
        code = generate_fallback_site(acme_request)
        assert "new Date().getFullYear()" in code
