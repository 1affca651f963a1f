import json
import re


def js_string(value: str) -> str:
    """
    Render a Python string as a JavaScript string literal that is safe to
    splice into generated code and into an inline <script> block.
    """
    # json escaping covers quotes, backslashes, newlines and U+2028/2029
    return json.dumps(value).replace("</", "<\\/")


def email_slug(name: str) -> str:
    # "Acme & Sons" -> "acmesons"; empty result falls back to a placeholder domain
    slug = re.sub(r"[^a-z0-9]", "", name.lower())
    return slug or "example"
