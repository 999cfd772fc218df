"""
Customization Context

Responsibilities:
- Represents the portfolio data bundle (profile, projects, social links)
- Substitutes {{ marker }} variables in template markup, style and script
- Expands PROJECTS / SOCIAL_LINKS loop regions in markup
- Assembles the publishable HTML page
- Loads and stores templates in the on-disk template library

Owns: Marker syntax, fallback values, page shell
Never: Validates, escapes or sandboxes template script content
"""

from portify.contexts.customization.customizer import (
    TemplateCustomizer,
    customize_template,
    generate_complete_page,
)
from portify.contexts.customization.portfolio_data_structure import (
    CustomizedTemplate,
    PortfolioData,
    Profile,
    Project,
    SocialLink,
    TemplateSource,
    load_portfolio_data,
)
from portify.contexts.customization.sample_template import get_sample_template
from portify.contexts.customization.template_registry import TemplateRegistry

__all__ = [
    # Engine
    "TemplateCustomizer",
    "customize_template",
    "generate_complete_page",
    "get_sample_template",
    # Data structure classes
    "PortfolioData",
    "Profile",
    "Project",
    "SocialLink",
    "TemplateSource",
    "CustomizedTemplate",
    "load_portfolio_data",
    # Template library
    "TemplateRegistry",
]
