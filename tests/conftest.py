import pytest

from sitegen.core.validator import validate_input
from sitegen.utils import config


SAMPLE_APP = (
    "function App() {\n"
    "  const h = React.createElement;\n"
    "  return h('div', { style: { padding: '20px' } },\n"
    "    h('h1', null, 'Acme'),\n"
    "    h('section', null, h('h2', null, 'About Acme'))\n"
    "  );\n"
    "}"
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """No real credential, no process-wide local mode, debug logs into tmp."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setattr(config, "LOCAL_MODE", False)
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def acme_payload():
    return {
        "name": "Acme",
        "industry": "Retail",
        "audience": "Shoppers",
        "color": "blue",
        "sections": ["About", "Contact"],
    }


@pytest.fixture
def acme_request(acme_payload):
    return validate_input(acme_payload)


@pytest.fixture
def sample_app():
    return SAMPLE_APP
