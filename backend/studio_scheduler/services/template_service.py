# backend/studio_scheduler/services/template_service.py
"""
Template rendering for confirmation emails.

Templates live under ``studio_scheduler/templates`` and are rendered with
Jinja2. Plain-text templates (``.txt``) are not autoescaped.
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from ..core.config import settings
from ..core.constants import BRAND_NAME

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateService:
    """Centralized template rendering using Jinja2."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
            autoescape=select_autoescape(enabled_extensions=("html",), default=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def get_common_context(self) -> Dict[str, Any]:
        """Context variables available to every template."""
        return {
            "brand_name": BRAND_NAME,
            "current_year": datetime.now().year,
            "default_director_phone": settings.default_director_phone,
        }

    def render_template(self, template_name: str, context: Optional[Dict[str, Any]] = None, **kwargs) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateNotFound: If template doesn't exist
        """
        try:
            template = self.env.get_template(template_name)

            full_context = self.get_common_context()
            if context:
                full_context.update(context)
            full_context.update(kwargs)

            return template.render(full_context)
        except TemplateNotFound:
            logger.error(f"Template not found: {template_name}")
            raise
