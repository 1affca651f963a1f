# sitegen/core/fallback.py
"""
Local website template.

Produces the same shape of code the backend is asked for (one `App` function,
React.createElement via `h`, no module syntax) with no external dependency.
Used for explicit local mode and whenever the remote path fails.

Output is a pure function of the request: no clock, no randomness. The footer
year is computed by the script itself at render time.
"""
from typing import Callable, Dict, List

from sitegen.core.theme import resolve_palette
from sitegen.models import GenerationRequest
from sitegen.utils.js_helpers import email_slug, js_string


def section_marker(section: str) -> str:
    """Marker attribute carried by the block rendered for `section`."""
    return f"'data-section': {js_string(section)}"


def _about(req: GenerationRequest) -> List[str]:
    body = (
        f"Welcome to {req.name}! We are a leading provider of {req.industry} solutions, "
        f"dedicated to serving {req.audience}. Our team of experts brings years of experience "
        "and innovation to help you achieve your goals."
    )
    return [
        "h('h2', { style: titleStyle }, " + js_string(f"About {req.name}") + "),",
        "h('div', { style: cardStyle },",
        "  h('p', { style: { fontSize: '18px', lineHeight: '1.8', color: '#4a5568' } }, " + js_string(body) + ")",
        ")",
    ]


def _services(req: GenerationRequest) -> List[str]:
    cards = [
        ("\U0001F3AF Consulting", f"Expert guidance tailored to your business needs in {req.industry}."),
        ("⚡ Implementation", "Seamless integration and deployment of cutting-edge solutions."),
        ("\U0001F6E0️ Support", "24/7 dedicated support to keep your operations running smoothly."),
    ]
    out = [
        "h('h2', { style: { ...titleStyle, textAlign: 'center' } }, 'Our Services'),",
        "h('div', { style: gridStyle },",
    ]
    for i, (title, text) in enumerate(cards):
        sep = "," if i < len(cards) - 1 else ""
        out.extend([
            "  h('div', { style: cardStyle },",
            "    h('h3', { style: { color: primaryColor, fontSize: '24px', marginBottom: '12px' } }, " + js_string(title) + "),",
            "    h('p', { style: { color: '#4a5568', lineHeight: '1.6' } }, " + js_string(text) + ")",
            "  )" + sep,
        ])
    out.append(")")
    return out


def _products(req: GenerationRequest) -> List[str]:
    plans = [
        ("Premium Package", "$99/mo", ["Full access to all features", "Priority support", "Advanced analytics"], "Choose Plan"),
        ("Enterprise", "Custom", ["Everything in Premium", "Dedicated account manager", "Custom integrations"], "Contact Sales"),
    ]
    out = [
        "h('h2', { style: { ...titleStyle, textAlign: 'center' } }, 'Our Products'),",
        "h('div', { style: gridStyle },",
    ]
    for i, (title, price, features, cta) in enumerate(plans):
        sep = "," if i < len(plans) - 1 else ""
        items = ",\n".join(
            "      h('li', { style: { padding: '8px 0' } }, " + js_string("✓ " + f) + ")" for f in features
        )
        out.extend([
            "  h('div', { style: cardStyle },",
            "    h('h3', { style: { color: primaryColor, fontSize: '22px' } }, " + js_string(title) + "),",
            "    h('p', { style: { fontSize: '32px', fontWeight: 'bold', color: '#1a1a1a', margin: '16px 0' } }, " + js_string(price) + "),",
            "    h('ul', { style: { listStyle: 'none', padding: 0, color: '#4a5568' } },",
            items,
            "    ),",
            "    h('button', { style: buttonStyle }, " + js_string(cta) + ")",
            "  )" + sep,
        ])
    out.append(")")
    return out


def _testimonials(req: GenerationRequest) -> List[str]:
    quotes = [
        (f"\"{req.name} transformed our business. Their expertise in {req.industry} is unmatched!\"", "- Sarah Johnson, CEO"),
        (f"\"Outstanding service and results. Highly recommend to anyone in {req.industry}.\"", "- Michael Chen, Director"),
    ]
    out = [
        "h('h2', { style: { ...titleStyle, textAlign: 'center' } }, 'What Our Clients Say'),",
        "h('div', { style: gridStyle },",
    ]
    for i, (quote, author) in enumerate(quotes):
        sep = "," if i < len(quotes) - 1 else ""
        out.extend([
            "  h('div', { style: { ...cardStyle, borderLeft: '4px solid ' + primaryColor } },",
            "    h('p', { style: { fontSize: '16px', fontStyle: 'italic', color: '#4a5568', marginBottom: '16px' } }, " + js_string(quote) + "),",
            "    h('p', { style: { fontWeight: 'bold', color: '#1a1a1a' } }, " + js_string(author) + ")",
            "  )" + sep,
        ])
    out.append(")")
    return out


def _gallery(req: GenerationRequest) -> List[str]:
    tiles = []
    for i in range(1, 4):
        first, second = ("primaryColor", "accentColor") if i % 2 else ("accentColor", "primaryColor")
        tiles.append(
            "  h('div', { style: { ...cardStyle, height: '200px', "
            f"background: 'linear-gradient(135deg, ' + {first} + ', ' + {second} + ')', "
            "display: 'flex', alignItems: 'center', justifyContent: 'center', color: 'white', fontSize: '24px' } }, "
            + js_string(f"\U0001F4F8 Project {i}") + ")"
        )
    return [
        "h('h2', { style: { ...titleStyle, textAlign: 'center' } }, 'Gallery'),",
        "h('div', { style: gridStyle },",
        ",\n".join(tiles),
        ")",
    ]


def _contact(req: GenerationRequest) -> List[str]:
    lines = [
        f"\U0001F4E7 Email: contact@{email_slug(req.name)}.com",
        "\U0001F4F1 Phone: +1 (555) 123-4567",
        "\U0001F4CD Address: 123 Business St, City, State 12345",
    ]
    rows = ",\n".join(
        "    h('p', { style: { fontSize: '18px', color: '#4a5568', marginBottom: '12px' } }, " + js_string(t) + ")"
        for t in lines
    )
    return [
        "h('h2', { style: { ...titleStyle, textAlign: 'center' } }, 'Contact Us'),",
        "h('div', { style: { ...cardStyle, maxWidth: '600px', margin: '0 auto' } },",
        "  h('div', { style: { marginBottom: '20px' } },",
        rows,
        "  ),",
        "  h('button', { style: { ...buttonStyle, width: '100%' } }, 'Send Message')",
        ")",
    ]


# known vocabulary, in render order
SECTION_BUILDERS: Dict[str, Callable[[GenerationRequest], List[str]]] = {
    "About": _about,
    "Services": _services,
    "Products": _products,
    "Testimonials": _testimonials,
    "Gallery": _gallery,
    "Contact": _contact,
}


def _indent(lines: List[str], prefix: str) -> str:
    out = []
    for block in lines:
        for ln in block.split("\n"):
            out.append(prefix + ln)
    return "\n".join(out)


def _section_block(name: str, req: GenerationRequest) -> str:
    body = SECTION_BUILDERS[name](req)
    return "\n".join([
        f"      h('section', {{ {section_marker(name)}, style: sectionStyle }},",
        _indent(body, "        "),
        "      )",
    ])


def generate_fallback_site(request: GenerationRequest) -> str:
    """
    Render the local template for a validated request.

    Sections are rendered in vocabulary order when present in request.sections;
    names outside the vocabulary are ignored.
    """
    primary, accent = resolve_palette(request.color)
    blocks = [_section_block(name, request) for name in SECTION_BUILDERS if name in request.sections]
    main_children = ",\n".join(blocks)

    return "\n".join([
        "function App() {",
        "  const h = React.createElement;",
        "",
        f"  const primaryColor = '{primary}';",
        f"  const accentColor = '{accent}';",
        "",
        "  const headerStyle = {",
        "    background: 'linear-gradient(135deg, ' + primaryColor + ' 0%, ' + accentColor + ' 100%)',",
        "    padding: '80px 20px',",
        "    textAlign: 'center',",
        "    color: 'white',",
        "    boxShadow: '0 4px 6px rgba(0,0,0,0.1)'",
        "  };",
        "  const containerStyle = { maxWidth: '1200px', margin: '0 auto', padding: '20px' };",
        "  const sectionStyle = { padding: '60px 20px', margin: '40px 0' };",
        "  const titleStyle = { fontSize: '36px', color: '#1a1a1a', marginBottom: '20px' };",
        "  const gridStyle = { display: 'grid', gridTemplateColumns: 'repeat(auto-fit, minmax(280px, 1fr))', gap: '20px' };",
        "  const cardStyle = {",
        "    background: 'white',",
        "    padding: '30px',",
        "    borderRadius: '12px',",
        "    boxShadow: '0 4px 12px rgba(0,0,0,0.1)',",
        "    margin: '20px 0'",
        "  };",
        "  const buttonStyle = {",
        "    background: primaryColor,",
        "    color: 'white',",
        "    padding: '12px 30px',",
        "    border: 'none',",
        "    borderRadius: '8px',",
        "    fontSize: '16px',",
        "    cursor: 'pointer',",
        "    marginTop: '20px'",
        "  };",
        "  const footerStyle = { background: '#1a1a1a', color: 'white', padding: '40px 20px', textAlign: 'center', marginTop: '60px' };",
        "",
        "  return h('div', { style: { fontFamily: 'system-ui, -apple-system, sans-serif', background: '#f8f9fa' } },",
        "    h('header', { style: headerStyle },",
        "      h('div', { style: containerStyle },",
        "        h('h1', { style: { fontSize: '48px', margin: '0 0 16px 0', fontWeight: 'bold' } }, " + js_string(request.name) + "),",
        "        h('p', { style: { fontSize: '20px', opacity: 0.95, margin: '0' } }, " + js_string(f"Professional {request.industry} Services") + "),",
        "        h('button', { style: buttonStyle }, 'Get Started')",
        "      )",
        "    ),",
        "    h('main', { style: containerStyle }" + ("," if blocks else ""),
        main_children,
        "    ),",
        "    h('footer', { style: footerStyle },",
        "      h('div', { style: containerStyle },",
        "        h('p', { style: { margin: '0', fontSize: '16px' } }, '\\u00a9 ' + new Date().getFullYear() + ' ' + " + js_string(f"{request.name}. All rights reserved.") + "),",
        "        h('p', { style: { margin: '10px 0 0 0', fontSize: '14px', opacity: 0.8 } }, " + js_string(f"Serving {request.audience} with excellence") + ")",
        "      )",
        "    )",
        "  );",
        "}",
    ])
