"""
Template Marker Patterns

Centralized marker syntax used by the customization engine. Templates authored
against these markers must keep working, so the syntax is fixed:

- Variable marker: {{ identifier }} (whitespace around the identifier ignored)
- Loop region: <!-- XXX_START --> fragment <!-- XXX_END -->
"""

import re
from dataclasses import dataclass
from typing import List

# Identifiers may be dotted (project.title, social.platformLower)
VARIABLE_MARKER = re.compile(r"\{\{\s*([A-Za-z_][\w.]*)\s*\}\}")


def loop_marker(label: str) -> re.Pattern:
    """Compile the HTML comment marker for one end of a loop region."""
    return re.compile(rf"<!--\s*{label}\s*-->")


@dataclass(frozen=True)
class ProfileVariables:
    """
    Profile identifiers recognized by the variable substitution pass.

    Anything else inside {{ }} is left untouched for the loop passes (or as
    literal text).
    """
    NAME: str = "name"
    TAGLINE: str = "tagline"
    BIO: str = "bio"
    PROFESSION: str = "profession"
    PROFILE_PHOTO_URL: str = "profilePhotoUrl"
    SUBDOMAIN: str = "subdomain"
    CUSTOM_DOMAIN: str = "customDomain"

    @classmethod
    def all(cls) -> List[str]:
        """Return list of all recognized profile identifiers."""
        return [
            cls.NAME,
            cls.TAGLINE,
            cls.BIO,
            cls.PROFESSION,
            cls.PROFILE_PHOTO_URL,
            cls.SUBDOMAIN,
            cls.CUSTOM_DOMAIN,
        ]


@dataclass(frozen=True)
class ProjectVariables:
    """Per-item identifiers inside a PROJECTS loop region."""
    TITLE: str = "project.title"
    DESCRIPTION: str = "project.description"
    IMAGE_URL: str = "project.imageUrl"
    PROJECT_URL: str = "project.projectUrl"
    TAGS: str = "project.tags"


@dataclass(frozen=True)
class SocialLinkVariables:
    """Per-item identifiers inside a SOCIAL_LINKS loop region."""
    PLATFORM: str = "social.platform"
    URL: str = "social.url"
    PLATFORM_LOWER: str = "social.platformLower"


@dataclass(frozen=True)
class LoopLabels:
    """Labels used inside the loop region comments."""
    PROJECTS_START: str = "PROJECTS_START"
    PROJECTS_END: str = "PROJECTS_END"
    SOCIAL_LINKS_START: str = "SOCIAL_LINKS_START"
    SOCIAL_LINKS_END: str = "SOCIAL_LINKS_END"
