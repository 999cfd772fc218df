"""
Integration tests for publishing.
Tests: template library + YAML bundle -> {publish_root}/{subdomain}/index.html with events.
"""

from pathlib import Path

import pytest

from portify.contexts.customization import PortfolioData, Profile, TemplateRegistry, load_portfolio_data
from portify.contexts.publishing import publish_portfolio
from portify.contexts.publishing import publisher
from portify.contexts.publishing.publisher import is_valid_subdomain
from portify.utils.event_logging import get_recent_events

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Keep logs and events inside the test's temporary directory."""
    monkeypatch.setattr(publisher, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setenv("PIPELINE_EVENTS_FILE", str(tmp_path / "logs" / "events.log"))


@pytest.mark.integration
def test_publish_portfolio(tmp_path):
    source = TemplateRegistry(FIXTURES_PATH / "templates").get_template("minimal_card")
    data = load_portfolio_data(FIXTURES_PATH / "ada_portfolio.yaml")

    result = publish_portfolio(source, data, publish_root=tmp_path / "sites", template_name="minimal_card")

    assert result.success
    assert result.error is None
    assert result.output_path == tmp_path / "sites" / "ada-lovelace-123456" / "index.html"
    assert (result.log_dir / "publish.log").exists()
    assert "Subdomain: ada-lovelace-123456" in (result.log_dir / "publish.log").read_text(encoding="utf-8")

    page = result.output_path.read_text(encoding="utf-8")
    assert "<h1>Ada Lovelace</h1>" in page
    assert "<li>Bernoulli Numbers</li>" in page
    assert '<a class="github" href="https://github.com/ada">GitHub</a>' in page
    assert '<a class="linkedin" href="#">LinkedIn</a>' in page

    events = get_recent_events(event_type="publish_completed")
    assert len(events) == 1
    assert events[0]["subdomain"] == "ada-lovelace-123456"
    assert events[0]["template"] == "minimal_card"


@pytest.mark.integration
@pytest.mark.parametrize("subdomain", [None, "", "Ada Lovelace", "../escape", "-ada"])
def test_publish_rejects_invalid_subdomain(tmp_path, subdomain):
    data = PortfolioData(profile=Profile(name="Ada", subdomain=subdomain))

    result = publish_portfolio(
        TemplateRegistry(FIXTURES_PATH / "templates").get_template("minimal_card"),
        data,
        publish_root=tmp_path / "sites",
    )

    assert not result.success
    assert "Invalid subdomain" in result.error
    assert not (tmp_path / "sites").exists()
    assert get_recent_events(event_type="publish_failed")[-1]["error"] == result.error


@pytest.mark.integration
def test_republish_overwrites(tmp_path):
    registry = TemplateRegistry(FIXTURES_PATH / "templates")
    source = registry.get_template("minimal_card")
    data = load_portfolio_data(FIXTURES_PATH / "ada_portfolio.yaml")

    publish_portfolio(source, data, publish_root=tmp_path)
    data.profile.name = "Augusta Ada King"
    result = publish_portfolio(source, data, publish_root=tmp_path)

    assert "<h1>Augusta Ada King</h1>" in result.output_path.read_text(encoding="utf-8")
    assert len(get_recent_events(event_type="publish_completed")) == 2


@pytest.mark.unit
def test_is_valid_subdomain():
    assert is_valid_subdomain("ada-lovelace-123456")
    assert is_valid_subdomain("a")
    assert not is_valid_subdomain("ada-")
    assert not is_valid_subdomain("ada.dev")
    assert not is_valid_subdomain("ADA")
