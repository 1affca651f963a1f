# sitegen/core/prompts.py
"""
Prompts used by the generation pipeline.

Goals:
- Force a single `App` function written with React.createElement, no JSX.
- Forbid module syntax, fences and prose: the preview runs the text directly
  as a classic script, so anything else breaks or is stripped later.
- Anchor the output shape with an example built from the same request, so the
  colors in the example match the ones the fallback template would use.
"""

from sitegen.core.theme import DEFAULT_THEME, resolve_palette
from sitegen.models import GenerationRequest
from sitegen.utils.js_helpers import js_string

DEFAULT_SECTIONS = ("About", "Services", "Contact")


def build_system_prompt() -> str:
    """
    System-role instruction for the code-generation call.
    """
    return (
        "You are an expert React developer who creates clean, modern, and professional website code. "
        "You always follow instructions precisely and generate production-ready code."
    )


def sections_text(request: GenerationRequest) -> str:
    return ", ".join(request.sections or DEFAULT_SECTIONS)


def theme_text(request: GenerationRequest) -> str:
    return request.color or DEFAULT_THEME


def build_example(request: GenerationRequest) -> str:
    """
    Structural example embedded in the prompt. Palette resolution is shared with
    core.fallback so the tokens here agree with the template output.
    """
    primary, accent = resolve_palette(request.color)
    name = js_string(request.name)
    tagline = js_string(f"Professional {request.industry} Services")
    copyright_line = js_string(f"{request.name}. All rights reserved.")

    lines = [
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
        "    color: 'white'",
        "  };",
        "",
        "  return h('div', { style: { fontFamily: 'system-ui, -apple-system, sans-serif' } },",
        "    h('header', { style: headerStyle },",
        f"      h('h1', {{ style: {{ fontSize: '48px', margin: '0 0 16px 0' }} }}, {name}),",
        f"      h('p', {{ style: {{ fontSize: '20px', opacity: 0.9 }} }}, {tagline})",
        "    ),",
        "    h('main', null,",
        f"      // Include sections here: {sections_text(request)}",
        "    ),",
        "    h('footer', { style: { background: '#1a1a1a', color: 'white', padding: '40px 20px', textAlign: 'center' } },",
        f"      h('p', null, '\\u00a9 ' + new Date().getFullYear() + ' ' + {copyright_line})",
        "    )",
        "  );",
        "}",
    ]
    return "\n".join(lines)


def build_prompt(request: GenerationRequest) -> str:
    """
    Render a validated request into the user prompt for the generation call.
    Pure: same request, same prompt.
    """
    sections = sections_text(request)
    theme = theme_text(request)

    prompt_lines = [
        "Generate a COMPLETE, PRODUCTION-READY React website for the following business:",
        "",
        "BUSINESS INFORMATION:",
        f"- Business Name: {request.name}",
        f"- Industry: {request.industry}",
        f"- Target Audience: {request.audience}",
        f"- Color Theme: {theme}",
        f"- Required Sections: {sections}",
        "",
        "CRITICAL REQUIREMENTS:",
        "1. Use ONLY React.createElement() syntax - ABSOLUTELY NO JSX",
        "2. Use shorthand: const h = React.createElement;",
        "3. Function name must be: App",
        "4. Use inline styles with modern, professional design",
        "5. NO import/export/require statements",
        "6. NO markdown code blocks or backticks",
        "7. NO comments or explanations",
        "8. Return ONLY executable JavaScript code",
        f"9. Include ALL requested sections: {sections}",
        "10. Do NOT use fetch, XMLHttpRequest, localStorage, sessionStorage, eval or Function",
        "",
        "DESIGN GUIDELINES:",
        "- Use modern color schemes with gradients",
        "- Add subtle shadows and hover effects",
        "- Ensure responsive design principles",
        "- Use professional typography",
        "- Make it visually appealing and premium-looking",
        "",
        "CODE STRUCTURE EXAMPLE:",
        build_example(request),
        "",
        f"Generate the complete App function now with ALL sections ({sections}). "
        "Make it professional and visually stunning:",
    ]
    return "\n".join(prompt_lines)
