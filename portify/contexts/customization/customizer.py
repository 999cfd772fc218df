"""
Template Customizer

Merges author-supplied template text with a portfolio data bundle.

Three passes, all plain text transforms:
1. Variable substitution: {{ name }}, {{ bio }}, ... over markup, style and script
2. Loop expansion: <!-- PROJECTS_START --> ... <!-- PROJECTS_END --> and
   <!-- SOCIAL_LINKS_START --> ... <!-- SOCIAL_LINKS_END --> over markup only
3. Page assembly: the three results wrapped in a complete HTML document

Substituted values are inserted literally and never re-scanned, so a value that
happens to contain {{ ... }} text comes out verbatim. Script content is not
validated or escaped; sandboxing belongs to whoever serves the page.

This module exports:
- Convenience functions: customize_template, generate_complete_page
- TemplateCustomizer class (pass-level operations)
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, Template, TemplateError

from portify.contexts.customization.defaults import (
    DEFAULT_LINK_URL,
    DEFAULT_PROFILE_PHOTO_URL,
    DEFAULT_PROJECT_IMAGE_URL,
    DESCRIPTION_BIO_LENGTH,
    FRAGMENT_SEPARATOR,
    NO_PROJECTS_FALLBACK,
    NO_SOCIAL_LINKS_FALLBACK,
    TAG_SEPARATOR,
)
from portify.contexts.customization.exceptions import TemplateRenderError
from portify.contexts.customization.logger import (
    log_loop_expansion,
    log_unterminated_region,
)
from portify.contexts.customization.portfolio_data_structure import (
    CustomizedTemplate,
    PortfolioData,
    Profile,
    Project,
    SocialLink,
)
from portify.contexts.customization.template_patterns import (
    VARIABLE_MARKER,
    LoopLabels,
    ProfileVariables,
    ProjectVariables,
    SocialLinkVariables,
    loop_marker,
)

SHELLS_PATH = Path(__file__).parent / "shells"
PAGE_SHELL = "page.html.jinja"


def profile_variables(profile: Optional[Profile]) -> Dict[str, str]:
    """Lookup table for the variable pass, with fallbacks applied."""
    profile = profile or Profile()
    return {
        ProfileVariables.NAME: profile.name or "",
        ProfileVariables.TAGLINE: profile.tagline or "",
        ProfileVariables.BIO: profile.bio or "",
        ProfileVariables.PROFESSION: profile.profession or "",
        ProfileVariables.PROFILE_PHOTO_URL: profile.profile_photo_url or DEFAULT_PROFILE_PHOTO_URL,
        ProfileVariables.SUBDOMAIN: profile.subdomain or "",
        ProfileVariables.CUSTOM_DOMAIN: profile.custom_domain or "",
    }


def project_variables(project: Project) -> Dict[str, str]:
    """Lookup table for one instantiated PROJECTS fragment."""
    return {
        ProjectVariables.TITLE: project.title or "",
        ProjectVariables.DESCRIPTION: project.description or "",
        ProjectVariables.IMAGE_URL: project.image_url or DEFAULT_PROJECT_IMAGE_URL,
        ProjectVariables.PROJECT_URL: project.project_url or DEFAULT_LINK_URL,
        ProjectVariables.TAGS: TAG_SEPARATOR.join(project.tags) if project.tags else "",
    }


def social_link_variables(link: SocialLink) -> Dict[str, str]:
    """Lookup table for one instantiated SOCIAL_LINKS fragment."""
    return {
        SocialLinkVariables.PLATFORM: link.platform or "",
        SocialLinkVariables.URL: link.url or DEFAULT_LINK_URL,
        SocialLinkVariables.PLATFORM_LOWER: link.platform.lower() if link.platform else "",
    }


def substitute_markers(content: str, variables: Dict[str, str]) -> str:
    """
    Replace every {{ identifier }} whose identifier is in the table.

    Single left-to-right scan; unknown identifiers keep their original marker
    text (including its whitespace) and replacement text is never re-scanned.
    """

    def _lookup(match: re.Match) -> str:
        identifier = match.group(1)
        if identifier in variables:
            return variables[identifier]
        return match.group(0)

    return VARIABLE_MARKER.sub(_lookup, content)


@dataclass(frozen=True)
class LoopRegion:
    """
    One kind of repeated block.

    Attributes:
        label: Name used in logs (e.g., "PROJECTS")
        start: Compiled start marker
        end: Compiled end marker
        item_variables: Builds the per-item lookup table
        empty_fallback: Text substituted for the whole region when the list is empty
    """

    label: str
    start: re.Pattern
    end: re.Pattern
    item_variables: Callable[[Any], Dict[str, str]]
    empty_fallback: str


PROJECTS_REGION = LoopRegion(
    label="PROJECTS",
    start=loop_marker(LoopLabels.PROJECTS_START),
    end=loop_marker(LoopLabels.PROJECTS_END),
    item_variables=project_variables,
    empty_fallback=NO_PROJECTS_FALLBACK,
)

SOCIAL_LINKS_REGION = LoopRegion(
    label="SOCIAL_LINKS",
    start=loop_marker(LoopLabels.SOCIAL_LINKS_START),
    end=loop_marker(LoopLabels.SOCIAL_LINKS_END),
    item_variables=social_link_variables,
    empty_fallback=NO_SOCIAL_LINKS_FALLBACK,
)


def expand_repeated_block(
    content: str,
    region: LoopRegion,
    items: Optional[Sequence[Any]],
) -> str:
    """
    Expand every region of one kind in content.

    Each region runs from a start marker to the nearest following end marker,
    so two regions of the same kind are expanded independently. The region
    (markers included) is replaced by one fragment copy per item, in input
    order, joined by a newline; or by region.empty_fallback when there are no
    items. A start marker without a following end marker leaves the rest of
    the text untouched.

    Args:
        content: Text to scan
        region: Loop region definition (markers, per-item table, fallback)
        items: Ordered items; None is treated as empty

    Returns:
        Text with all complete regions expanded
    """
    items = list(items or [])
    item_tables = [region.item_variables(item) for item in items]

    parts = []
    pos = 0
    regions_found = 0

    while True:
        start = region.start.search(content, pos)
        if start is None:
            break

        end = region.end.search(content, start.end())
        if end is None:
            log_unterminated_region(region.label, start.start())
            break

        fragment = content[start.end():end.start()]
        parts.append(content[pos:start.start()])

        if not item_tables:
            parts.append(region.empty_fallback)
        else:
            parts.append(
                FRAGMENT_SEPARATOR.join(
                    substitute_markers(fragment, table) for table in item_tables
                )
            )

        pos = end.end()
        regions_found += 1

    parts.append(content[pos:])
    log_loop_expansion(region.label, regions_found, len(item_tables))

    return "".join(parts)


def page_description(profile: Optional[Profile]) -> str:
    """Tagline, else the first 160 characters of the bio, else empty."""
    profile = profile or Profile()
    if profile.tagline:
        return profile.tagline
    if profile.bio:
        return profile.bio[:DESCRIPTION_BIO_LENGTH]
    return ""


class TemplateCustomizer:
    """
    Customization engine for portfolio templates.

    Holds only the Jinja2 page shell; every call is independent, so one instance
    can be shared freely between callers.

    The shell uses custom delimiters so it never interacts with the {{ }}
    markers of portfolio templates:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    """

    def __init__(self, shells_path: Path = None):
        """
        Initialize the customizer.

        Args:
            shells_path: Directory holding the page shell. Defaults to the
                         shells/ directory shipped with this package.
        """
        self.shells_path = shells_path or SHELLS_PATH
        self.env = Environment(
            loader=FileSystemLoader(str(self.shells_path)),
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            autoescape=False,
            trim_blocks=False,
            lstrip_blocks=False,
        )
        self._page_shell: Optional[Template] = None

    @property
    def page_shell(self) -> Template:
        """Page shell template, loaded on first use."""
        if self._page_shell is None:
            try:
                self._page_shell = self.env.get_template(PAGE_SHELL)
            except TemplateError as e:
                raise TemplateRenderError(
                    "Failed to load page shell",
                    shell_path=self.shells_path / PAGE_SHELL,
                    original_error=e,
                ) from e
        return self._page_shell

    def replace_variables(self, content: str, profile: Optional[Profile]) -> str:
        """Replace profile markers ({{ name }}, {{ bio }}, ...) in one text blob."""
        return substitute_markers(content or "", profile_variables(profile))

    def replace_projects(self, content: str, projects: Optional[Sequence[Project]] = None) -> str:
        """Expand <!-- PROJECTS_START --> ... <!-- PROJECTS_END --> regions."""
        return expand_repeated_block(content or "", PROJECTS_REGION, projects)

    def replace_social_links(
        self, content: str, social_links: Optional[Sequence[SocialLink]] = None
    ) -> str:
        """Expand <!-- SOCIAL_LINKS_START --> ... <!-- SOCIAL_LINKS_END --> regions."""
        return expand_repeated_block(content or "", SOCIAL_LINKS_REGION, social_links)

    def customize_template(
        self,
        html_content: Optional[str],
        css_content: Optional[str],
        js_content: Optional[str],
        data: PortfolioData,
    ) -> CustomizedTemplate:
        """
        Customize the three template parts with user data.

        Variables are replaced in all three parts; loop regions are expanded in
        the markup only.
        """
        html = self.replace_variables(html_content, data.profile)
        html = self.replace_projects(html, data.projects)
        html = self.replace_social_links(html, data.social_links)

        css = self.replace_variables(css_content, data.profile)
        js = self.replace_variables(js_content, data.profile)

        return CustomizedTemplate(html=html, css=css, js=js)

    def generate_complete_page(
        self,
        html_content: Optional[str],
        css_content: Optional[str],
        js_content: Optional[str],
        data: PortfolioData,
    ) -> str:
        """
        Generate a self-contained HTML page with embedded style and script.

        Raises:
            TemplateRenderError: If the page shell cannot be loaded or rendered
        """
        customized = self.customize_template(html_content, css_content, js_content, data)
        profile = data.profile or Profile()

        try:
            return self.page_shell.render(
                title=profile.name or "",
                description=page_description(profile),
                css=customized.css,
                html=customized.html,
                js=customized.js,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render page shell",
                shell_path=self.shells_path / PAGE_SHELL,
                original_error=e,
            ) from e


_default_customizer = TemplateCustomizer()


def customize_template(
    html_content: Optional[str],
    css_content: Optional[str],
    js_content: Optional[str],
    data: PortfolioData,
) -> CustomizedTemplate:
    """Customize markup, style and script; see TemplateCustomizer.customize_template."""
    return _default_customizer.customize_template(html_content, css_content, js_content, data)


def generate_complete_page(
    html_content: Optional[str],
    css_content: Optional[str],
    js_content: Optional[str],
    data: PortfolioData,
) -> str:
    """Assemble the publishable page; see TemplateCustomizer.generate_complete_page."""
    return _default_customizer.generate_complete_page(html_content, css_content, js_content, data)
