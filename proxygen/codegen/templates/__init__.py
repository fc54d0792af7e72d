"""
Method-body templates for the proxy plugins.
"""

from .renderer import JinjaTemplateRenderer, get_template_renderer

__all__ = ["JinjaTemplateRenderer", "get_template_renderer"]
