"""Unit tests for DatabaseFormat and its config-driven constructor."""

from compilation_db import DatabaseFormat, config


class TestDatabaseFormat:

    def test_defaults_to_array(self):
        assert DatabaseFormat().is_command_as_array() is True

    def test_setter_is_fluent(self):
        fmt = DatabaseFormat()
        assert fmt.set_command_as_array(False) is fmt
        assert fmt.is_command_as_array() is False

    def test_chained_setters(self):
        fmt = DatabaseFormat().set_command_as_array(False).set_command_as_array(True)
        assert fmt.is_command_as_array() is True

    def test_repr(self):
        assert repr(DatabaseFormat()) == "DatabaseFormat(command_as_array=True)"

    def test_from_config_uses_environment_default(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_COMMAND_AS_ARRAY", False)
        assert DatabaseFormat.from_config().is_command_as_array() is False

    def test_plain_constructor_ignores_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_COMMAND_AS_ARRAY", False)
        assert DatabaseFormat().is_command_as_array() is True
