"""
Unit tests for the indentation-aware writer.
"""

import pytest

from proxygen.codegen.writer import Writer
from proxygen.utils.config import GenerationConfig, ProxyGenConfig, set_config
from proxygen.utils.exceptions import ConfigurationError


class TestWriter:
    """Test cases for Writer."""

    def test_indentation_applied_once_per_line(self):
        writer = Writer(indent_size=4)
        writer.writeln("if x:").indent().write("a = ").write("1\n").writeln("b = 2").outdent()
        assert writer.content == "if x:\n    a = 1\n    b = 2\n"

    def test_multiline_write(self):
        writer = Writer(indent_size=2).indent()
        writer.writeln("one\ntwo\n\nthree")
        assert writer.content == "  one\n  two\n\n  three\n"

    def test_nested_scopes(self):
        writer = Writer(indent_size=4)
        writer.writeln("a").indent().writeln("b").indent().writeln("c").outdent().outdent().writeln("d")
        assert writer.content == "a\n    b\n        c\nd\n"
        assert writer.indentation_level == 0

    def test_outdent_below_zero(self):
        with pytest.raises(ConfigurationError):
            Writer().outdent()

    def test_rtrim_keeps_final_newline(self):
        writer = Writer().writeln("x = 1   ").writeln().writeln()
        assert writer.rtrim().content == "x = 1\n"

    def test_rtrim_without_newline(self):
        assert Writer().write("x  ").rtrim().content == "x"

    def test_reset(self):
        writer = Writer().indent().writeln("x")
        writer.reset()
        assert writer.content == ""
        assert writer.indentation_level == 0

    def test_indent_size_from_config(self):
        config = ProxyGenConfig()
        config.generation = GenerationConfig(indent_size=2)
        set_config(config)

        writer = Writer().indent().writeln("x")
        assert writer.content == "  x\n"
