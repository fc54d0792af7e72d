"""
Unit tests for method-body template rendering.
"""

import pytest

from proxygen.codegen.templates import JinjaTemplateRenderer, get_template_renderer
from proxygen.utils.exceptions import ConfigurationError


class TestJinjaTemplateRenderer:
    """Test cases for JinjaTemplateRenderer."""

    def setup_method(self):
        self.renderer = JinjaTemplateRenderer()

    def test_packaged_templates(self):
        assert set(self.renderer.list_templates()) >= {
            "interception_body.py.j2",
            "lazy_guard.py.j2",
            "lazy_initialize.py.j2",
        }

    def test_lazy_guard(self):
        body = self.renderer.render_file("lazy_guard.py.j2", {
            "initialized": "__cg_initialized",
            "initialize": "__cg_initialize",
        })
        assert body == "if not self.__cg_initialized:\n    self.__cg_initialize()"

    def test_interception_body(self):
        body = self.renderer.render_file("interception_body.py.j2", {
            "loader": "__loader",
            "error": "Err",
            "message": "no loader",
            "call_descriptor": "CD",
            "invocation": "MI",
            "class_name": "shop.Order",
            "method_name": "cancel",
            "arguments": "[reason]",
            "keywords": "{}",
            "has_keywords": False,
            "target": "_shop_Order.cancel",
            "returns_value": False,
        })
        assert body == (
            "if self.__loader is None:\n"
            "    raise Err('no loader')\n"
            "\n"
            "MI(\n"
            "    _shop_Order.cancel,\n"
            "    self,\n"
            "    [reason],\n"
            "    self.__loader.load_interceptors(\n"
            "        CD('shop.Order', 'cancel', self, [reason], {})),\n"
            ").proceed()"
        )

    def test_interception_body_binds_no_locals(self):
        """Test the body never assigns names a parameter could share."""
        body = self.renderer.render_file("interception_body.py.j2", {
            "loader": "__loader",
            "error": "Err",
            "message": "no loader",
            "call_descriptor": "CD",
            "invocation": "MI",
            "class_name": "shop.Order",
            "method_name": "tag",
            "arguments": "[*labels]",
            "keywords": "{'sep': sep}",
            "has_keywords": True,
            "target": "_shop_Order.tag",
            "returns_value": True,
        })
        assert " = " not in body
        assert body.startswith("if self.__loader is None:")
        assert "\nreturn MI(\n" in body
        assert body.endswith("    {'sep': sep},\n).proceed()")

    def test_pyrepr_filter(self):
        assert self.renderer.render("{{ value | pyrepr }}", {"value": "it's"}) == '"it\'s"'

    def test_undefined_variables_fail(self):
        with pytest.raises(ConfigurationError):
            self.renderer.render_file("lazy_guard.py.j2", {"initialized": "x"})

    def test_missing_template(self):
        with pytest.raises(ConfigurationError):
            self.renderer.render_file("missing.j2", {})


def test_shared_renderer():
    assert get_template_renderer() is get_template_renderer()
