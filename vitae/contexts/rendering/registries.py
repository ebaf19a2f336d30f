"""
Rendering Registries

Loads and caches the Jinja2 page templates.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound, select_autoescape

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", str(DEFAULT_TEMPLATES_PATH)))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Templates are stored as {templates_path}/{page_name}.html.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the page templates. Defaults to
                            VITAE_TEMPLATES_PATH from environment, else the bundled templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, page_name: str) -> Template:
        """
        Get a template by page name, loading and caching it if necessary.

        Args:
            page_name: Name of the page (e.g., 'timeline')

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if page_name in self._cache:
            return self._cache[page_name]

        template_file = f"{page_name}.html.jinja"
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for page '{page_name}' at {self.get_template_path(page_name)}"
            ) from e

        self._cache[page_name] = template
        return template

    def get_template_path(self, page_name: str) -> Path:
        return self.templates_path / f"{page_name}.html.jinja"

    def is_cached(self, page_name: str) -> bool:
        return page_name in self._cache
