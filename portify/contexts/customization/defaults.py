"""
Default values for portfolio customization.

Fallbacks substituted when a profile field, project field, or social link field
is empty or absent, plus the fixed vocabularies stored alongside templates and
portfolios.
"""

# Image fallbacks (served by the web app's static assets)
DEFAULT_PROFILE_PHOTO_URL = "/placeholder-avatar.png"
DEFAULT_PROJECT_IMAGE_URL = "/placeholder-project.png"

# Link fallback for projects and social links without a destination
DEFAULT_LINK_URL = "#"

# Separator used to display a project's tag list
TAG_SEPARATOR = ", "

# Separator placed between instantiated loop fragments
FRAGMENT_SEPARATOR = "\n"

# Meta description falls back to this many leading characters of the bio
DESCRIPTION_BIO_LENGTH = 160

# Comments substituted for loop regions when the list is empty
NO_PROJECTS_FALLBACK = "<!-- No projects yet -->"
NO_SOCIAL_LINKS_FALLBACK = "<!-- No social links yet -->"

TEMPLATE_CATEGORIES = [
    "minimal",
    "3d",
    "animated",
    "visual",
    "futuristic",
    "gamer",
    "startup",
    "designer",
]