"""
Template Rendering Engine.

This module renders the method bodies the proxy plugins splice into
generated classes. Bodies live as Jinja2 templates next to this file;
undefined template variables are errors rather than empty strings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ...utils.exceptions import ConfigurationError
from ..values import export_value


class JinjaTemplateRenderer:
    """Jinja2-based renderer for generated method bodies."""

    def __init__(self, template_dir: Optional[str] = None):
        if template_dir is None:
            template_dir = os.path.dirname(__file__)

        self._template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )

        self._setup_custom_filters()

    def _setup_custom_filters(self) -> None:
        """Register the filters the body templates rely on."""

        self._env.filters["pyrepr"] = export_value

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            return self._env.from_string(template).render(**context)
        except TemplateError as e:
            raise ConfigurationError(f"Template rendering failed: {e}") from e

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """
        Render a template file with the given context.

        Args:
            template_path: File name relative to the template directory
            context: Template variables

        Returns:
            Rendered text without a trailing newline

        Raises:
            ConfigurationError: If the template is missing or a variable is undefined
        """
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise ConfigurationError(f"Template file rendering failed ({template_path}): {e}") from e

    def list_templates(self) -> List[str]:
        return self._env.list_templates(extensions=["j2"])


_renderer: Optional[JinjaTemplateRenderer] = None


def get_template_renderer() -> JinjaTemplateRenderer:
    """Get the shared renderer for the packaged templates."""
    global _renderer
    if _renderer is None:
        _renderer = JinjaTemplateRenderer()
    return _renderer
