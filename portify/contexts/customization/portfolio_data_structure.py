"""
Portfolio Data Structures

Defines the data bundle consumed by the customization engine: one profile,
an ordered list of projects and an ordered list of social links, plus the
three-part template source (markup, style, script).

Stored records use camelCase keys (profilePhotoUrl, displayOrder); YAML
bundles written by hand often use snake_case. Both are accepted by the loaders.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from portify.contexts.customization.exceptions import InvalidPortfolioDataError


@dataclass
class Profile:
    """
    Portfolio owner's profile fields. All optional.

    Attributes:
        name: Display name
        tagline: One-line tagline
        bio: Free-form biography
        profession: Profession category (developer, designer, ...)
        profile_photo_url: Avatar URL
        subdomain: Published subdomain (name-123456)
        custom_domain: Custom domain, if configured
    """

    name: Optional[str] = None
    tagline: Optional[str] = None
    bio: Optional[str] = None
    profession: Optional[str] = None
    profile_photo_url: Optional[str] = None
    subdomain: Optional[str] = None
    custom_domain: Optional[str] = None


@dataclass
class Project:
    """Showcased project. Tags are displayed joined with ", "."""

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    project_url: Optional[str] = None
    tags: Optional[List[str]] = None
    display_order: int = 0


@dataclass
class SocialLink:
    """Social profile link (github, twitter, linkedin, ...)."""

    platform: Optional[str] = None
    url: Optional[str] = None
    display_order: int = 0


@dataclass
class PortfolioData:
    """
    Data bundle for one customization call.

    Projects and social links are used in the order given; the engine never
    re-sorts them. Use sort_by_display_order() beforehand when the records come
    from storage unsorted.
    """

    profile: Profile = field(default_factory=Profile)
    projects: List[Project] = field(default_factory=list)
    social_links: List[SocialLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PortfolioData":
        """
        Build a bundle from a plain mapping.

        Expected shape:
            profile: {name, tagline, bio, profession, profilePhotoUrl, subdomain, customDomain}
            projects: [{title, description, imageUrl, projectUrl, tags, displayOrder}, ...]
            socialLinks: [{platform, url, displayOrder}, ...]

        Raises:
            InvalidPortfolioDataError: If the mapping does not have this shape
        """
        if not isinstance(data, dict):
            raise InvalidPortfolioDataError(
                f"Portfolio data must be a mapping, got {type(data).__name__}"
            )

        profile_data = data.get("profile")
        if not isinstance(profile_data, dict):
            raise InvalidPortfolioDataError("Portfolio data must contain a 'profile' mapping")

        projects_data = _get_list(data, "projects")
        links_data = _get_list(data, "socialLinks", "social_links")

        return cls(
            profile=Profile(
                name=_get_str(profile_data, "name"),
                tagline=_get_str(profile_data, "tagline"),
                bio=_get_str(profile_data, "bio"),
                profession=_get_str(profile_data, "profession"),
                profile_photo_url=_get_str(profile_data, "profilePhotoUrl", "profile_photo_url"),
                subdomain=_get_str(profile_data, "subdomain"),
                custom_domain=_get_str(profile_data, "customDomain", "custom_domain"),
            ),
            projects=[_project_from_dict(p) for p in projects_data],
            social_links=[_social_link_from_dict(s) for s in links_data],
        )


@dataclass
class TemplateSource:
    """Author-supplied template text: markup, style and script."""

    html: str = ""
    css: str = ""
    js: str = ""


@dataclass
class CustomizedTemplate:
    """Template text after customization, for callers that re-embed the parts."""

    html: str
    css: str
    js: str


def load_portfolio_data(yaml_path: Path, sort: bool = True) -> PortfolioData:
    """
    Load a portfolio data bundle from a YAML file.

    Args:
        yaml_path: Path to YAML bundle
        sort: Order projects and social links by display_order (default: True)

    Returns:
        PortfolioData instance

    Raises:
        FileNotFoundError: If yaml_path does not exist
        InvalidPortfolioDataError: If the YAML structure is invalid
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Portfolio data file not found: {yaml_path}")

    yaml_dict = load_yaml_document(yaml_path)
    data = PortfolioData.from_dict(yaml_dict)

    if sort:
        data.projects = sort_by_display_order(data.projects)
        data.social_links = sort_by_display_order(data.social_links)

    return data


def load_yaml_document(yaml_path: Path) -> Any:
    """
    Load a YAML document as plain containers.

    Field values are free text, so `${...}` (JS template literals, shell
    snippets) is kept literally rather than resolved as an interpolation.

    Raises:
        InvalidPortfolioDataError: If the file is not well-formed YAML
    """
    try:
        return OmegaConf.to_container(OmegaConf.load(yaml_path), resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidPortfolioDataError(f"Malformed YAML in {yaml_path}: {e}") from e


def sort_by_display_order(records: Sequence[Any]) -> List[Any]:
    """
    Order records by their display_order attribute (stable, missing as 0).

    Mirrors how stored projects and social links are listed; ties keep their
    original relative order.
    """
    return sorted(records, key=lambda record: getattr(record, "display_order", 0) or 0)


def generate_subdomain(name: str, suffix: str) -> str:
    """
    Build a subdomain from a display name and a uniqueness suffix.

    Example:
        >>> generate_subdomain("Ada Lovelace", "123456")
        'ada-lovelace-123456'
    """
    base = re.sub(r"\s+", "-", name.strip().lower())
    return f"{base}-{suffix}"


def _first_present(mapping: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in mapping and mapping[key] is not None:
            return mapping[key]
    return None


def _get_str(mapping: Dict[str, Any], *keys: str) -> Optional[str]:
    value = _first_present(mapping, *keys)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise InvalidPortfolioDataError(f"Field '{keys[0]}' must be a string, got {type(value).__name__}")
    return str(value)


def _get_list(mapping: Dict[str, Any], *keys: str) -> List[Any]:
    value = _first_present(mapping, *keys)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidPortfolioDataError(f"Field '{keys[0]}' must be a list, got {type(value).__name__}")
    for entry in value:
        if not isinstance(entry, dict):
            raise InvalidPortfolioDataError(f"Entries of '{keys[0]}' must be mappings")
    return value


def _get_order(mapping: Dict[str, Any]) -> int:
    value = _first_present(mapping, "displayOrder", "display_order")
    try:
        return int(value) if value is not None else 0
    except (TypeError, ValueError):
        raise InvalidPortfolioDataError(f"displayOrder must be an integer, got {value!r}")


def _project_from_dict(data: Dict[str, Any]) -> Project:
    tags = _first_present(data, "tags")
    if tags is not None and not isinstance(tags, list):
        raise InvalidPortfolioDataError("Project 'tags' must be a list")

    return Project(
        title=_get_str(data, "title"),
        description=_get_str(data, "description"),
        image_url=_get_str(data, "imageUrl", "image_url"),
        project_url=_get_str(data, "projectUrl", "project_url"),
        tags=[str(tag) for tag in tags] if tags is not None else None,
        display_order=_get_order(data),
    )


def _social_link_from_dict(data: Dict[str, Any]) -> SocialLink:
    return SocialLink(
        platform=_get_str(data, "platform"),
        url=_get_str(data, "url"),
        display_order=_get_order(data),
    )
