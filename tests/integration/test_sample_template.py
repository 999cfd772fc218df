"""
Integration test for the built-in sample template.
Tests: sample template + fully populated bundle -> page with no unresolved markers.
"""

import re
from pathlib import Path

import pytest

from portify.contexts.customization import (
    PortfolioData,
    Profile,
    Project,
    SocialLink,
    generate_complete_page,
    get_sample_template,
    load_portfolio_data,
)
from portify.contexts.customization.defaults import NO_PROJECTS_FALLBACK, NO_SOCIAL_LINKS_FALLBACK
from portify.contexts.customization.template_patterns import ProfileVariables

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

RECOGNIZED_MARKER = re.compile(
    r"\{\{\s*(?:"
    + "|".join(ProfileVariables.all())
    + r"|project\.\w+|social\.\w+)\s*\}\}"
)


@pytest.mark.integration
def test_sample_template_is_deterministic():
    first = get_sample_template()
    second = get_sample_template()

    assert first == second
    assert first is not second


@pytest.mark.integration
def test_sample_template_uses_every_marker():
    sample = get_sample_template()

    for identifier in ProfileVariables.all():
        assert "{{" + identifier + "}}" in sample.html
    for identifier in ["project.title", "project.description", "project.imageUrl",
                       "project.projectUrl", "project.tags"]:
        assert "{{" + identifier + "}}" in sample.html
    for identifier in ["social.platform", "social.url", "social.platformLower"]:
        assert "{{" + identifier + "}}" in sample.html
    assert "<!-- PROJECTS_START -->" in sample.html
    assert "<!-- SOCIAL_LINKS_START -->" in sample.html


@pytest.mark.integration
def test_sample_roundtrip_fully_populated():
    """Full assembly leaves no recognized markers and no loop comments."""
    sample = get_sample_template()
    data = load_portfolio_data(FIXTURES_PATH / "ada_portfolio.yaml")

    page = generate_complete_page(sample.html, sample.css, sample.js, data)

    assert RECOGNIZED_MARKER.search(page) is None
    assert "PROJECTS_START" not in page
    assert "PROJECTS_END" not in page
    assert "SOCIAL_LINKS_START" not in page
    assert "SOCIAL_LINKS_END" not in page

    assert "<title>Ada Lovelace - Portfolio</title>" in page
    assert '<meta name="description" content="First programmer">' in page
    assert page.count('class="project-card"') == 2
    assert page.index("Bernoulli Numbers") < page.index("Difference Engine Notes")
    assert 'class="social-link linkedin"' in page
    assert 'class="social-link github"' in page
    assert "<p class=\"tags\">math, algorithms</p>" in page
    assert "console.log('Portfolio for Ada Lovelace loaded successfully!');" in page


@pytest.mark.integration
def test_sample_with_empty_lists():
    sample = get_sample_template()
    data = PortfolioData(profile=Profile(name="Grace"))

    page = generate_complete_page(sample.html, sample.css, sample.js, data)

    assert NO_PROJECTS_FALLBACK in page
    assert NO_SOCIAL_LINKS_FALLBACK in page
    assert RECOGNIZED_MARKER.search(page) is None
    assert 'src="/placeholder-avatar.png"' in page


@pytest.mark.integration
def test_sample_with_sparse_items():
    sample = get_sample_template()
    data = PortfolioData(
        profile=Profile(name="Grace"),
        projects=[Project(title="COBOL")],
        social_links=[SocialLink(platform="GitHub")],
    )

    page = generate_complete_page(sample.html, sample.css, sample.js, data)

    assert '<img src="/placeholder-project.png" alt="COBOL">' in page
    assert '<a href="#" target="_blank">View Project</a>' in page
    assert '<a href="#" target="_blank" class="social-link github">' in page
