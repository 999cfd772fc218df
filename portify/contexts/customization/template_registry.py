import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from portify.contexts.customization.defaults import TEMPLATE_CATEGORIES
from portify.contexts.customization.exceptions import InvalidPortfolioDataError, TemplateNotFoundError
from portify.contexts.customization.logger import _log_info, _log_warning, log_template_loaded
from portify.contexts.customization.portfolio_data_structure import TemplateSource, load_yaml_document

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("TEMPLATES_PATH", "data/templates"))

# File names inside a template directory
HTML_FILE = "template.html"
CSS_FILE = "style.css"
JS_FILE = "script.js"
METADATA_FILE = "template.yaml"


class TemplateRegistry:
    """
    Registry for loading and caching portfolio templates from disk.

    Templates are stored in {templates_path}/{template_name}/ as:
    - template.html: markup (may contain loop regions)
    - style.css: style
    - script.js: script
    - template.yaml: optional metadata (name, category, description, is_featured)

    Missing parts load as empty strings.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for template directories. Defaults to
                            the TEMPLATES_PATH environment variable.
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, TemplateSource] = {}

    def get_template_path(self, template_name: str) -> Path:
        """Directory of a template (whether or not it exists)."""
        return self.templates_path / template_name

    def has_template(self, template_name: str) -> bool:
        """Check whether a template directory exists."""
        return self.get_template_path(template_name).is_dir()

    def get_template(self, template_name: str) -> TemplateSource:
        """
        Get a template by name, loading and caching it if necessary.

        Raises:
            TemplateNotFoundError: If the template directory doesn't exist
        """
        if template_name in self._cache:
            log_template_loaded(template_name, self.get_template_path(template_name), cached=True)
            return self._cache[template_name]

        template_dir = self.get_template_path(template_name)
        if not template_dir.is_dir():
            raise TemplateNotFoundError(template_name, self.templates_path)

        source = TemplateSource(
            html=_read_part(template_dir / HTML_FILE),
            css=_read_part(template_dir / CSS_FILE),
            js=_read_part(template_dir / JS_FILE),
        )
        self._cache[template_name] = source
        log_template_loaded(template_name, template_dir, cached=False)

        return source

    def get_metadata(self, template_name: str) -> Dict[str, Any]:
        """
        Load template metadata, filling defaults for missing fields.

        Unknown categories are kept but logged as a warning.

        Raises:
            TemplateNotFoundError: If the template directory doesn't exist
        """
        template_dir = self.get_template_path(template_name)
        if not template_dir.is_dir():
            raise TemplateNotFoundError(template_name, self.templates_path)

        metadata = {
            "name": template_name,
            "category": "minimal",
            "description": "",
            "is_featured": False,
        }

        metadata_path = template_dir / METADATA_FILE
        if metadata_path.exists():
            try:
                loaded = load_yaml_document(metadata_path)
            except InvalidPortfolioDataError as e:
                _log_warning(f"Ignoring metadata for '{template_name}': {e}")
                loaded = None

            if isinstance(loaded, dict):
                metadata.update(loaded)
            elif loaded:
                _log_warning(
                    f"Ignoring metadata for '{template_name}': expected a mapping, "
                    f"got {type(loaded).__name__}"
                )

        if metadata["category"] not in TEMPLATE_CATEGORIES:
            _log_warning(
                f"Template '{template_name}' has unknown category '{metadata['category']}'. "
                f"Known categories: {TEMPLATE_CATEGORIES}"
            )

        return metadata

    def list_templates(self) -> List[str]:
        """Names of all templates in the library, sorted."""
        if not self.templates_path.is_dir():
            return []
        return sorted(p.name for p in self.templates_path.iterdir() if p.is_dir())

    def save_template(
        self,
        template_name: str,
        source: TemplateSource,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Path:
        """
        Write a template into the library, replacing any existing parts.

        Returns:
            Path to the template directory
        """
        template_dir = self.get_template_path(template_name)
        template_dir.mkdir(parents=True, exist_ok=True)

        (template_dir / HTML_FILE).write_text(source.html or "", encoding="utf-8")
        (template_dir / CSS_FILE).write_text(source.css or "", encoding="utf-8")
        (template_dir / JS_FILE).write_text(source.js or "", encoding="utf-8")

        if metadata:
            OmegaConf.save(OmegaConf.create(metadata), template_dir / METADATA_FILE)

        self._cache.pop(template_name, None)
        _log_info(f"Saved template '{template_name}' to {template_dir}")

        return template_dir

    def is_cached(self, template_name: str) -> bool:
        """Check if a template is cached."""
        return template_name in self._cache

    def clear_cache(self) -> None:
        """Clear the template cache."""
        self._cache.clear()


def _read_part(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")
