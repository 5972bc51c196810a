"""Tests for connection string resolution."""
import pytest

from errorlog.core.connection import resolve_connection_string
from errorlog.core.exceptions import ConfigurationError


class TestConnectionPrecedence:
    """First non-empty candidate wins, in name / literal / app key order."""

    def test_name_wins_over_literal(self):
        config = {"connectionStringName": "X", "connectionString": "Y"}
        assert resolve_connection_string(config) == "X"

    def test_name_wins_over_app_key(self):
        config = {"connectionStringName": "X", "connectionStringAppKey": "K"}
        assert resolve_connection_string(config, app_settings={"K": "Z"}) == "X"

    def test_literal_used_without_name(self):
        config = {"connectionString": "redis://cache:6379/2"}
        assert resolve_connection_string(config) == "redis://cache:6379/2"

    def test_empty_name_falls_through_to_literal(self):
        config = {"connectionStringName": "", "connectionString": "Y"}
        assert resolve_connection_string(config) == "Y"

    def test_literal_wins_over_app_key(self):
        config = {"connectionString": "Y", "connectionStringAppKey": "K"}
        assert resolve_connection_string(config, app_settings={"K": "Z"}) == "Y"

    def test_app_key_resolved_through_settings(self):
        config = {"connectionStringAppKey": "K"}
        assert resolve_connection_string(config, app_settings={"K": "Z"}) == "Z"

    def test_app_key_missing_from_settings_is_empty(self):
        config = {"connectionStringAppKey": "K"}
        assert resolve_connection_string(config, app_settings={"other": "Z"}) == ""

    def test_app_key_without_settings_table_is_empty(self):
        config = {"connectionStringAppKey": "K"}
        assert resolve_connection_string(config) == ""

    def test_nothing_configured_is_empty(self):
        assert resolve_connection_string({}) == ""

    def test_all_empty_is_empty(self):
        config = {
            "connectionStringName": "",
            "connectionString": "",
            "connectionStringAppKey": "",
        }
        assert resolve_connection_string(config, app_settings={"": "Z"}) == ""


class TestNamedConnectionStrings:
    """Named references go through the named table when one is supplied."""

    def test_name_looked_up_in_table(self):
        config = {"connectionStringName": "errors", "connectionString": "Y"}
        named = {"errors": "redis://errors:6379/0"}
        assert resolve_connection_string(config, connection_strings=named) == "redis://errors:6379/0"

    def test_name_missing_from_table_raises(self):
        config = {"connectionStringName": "errors"}
        with pytest.raises(ConfigurationError, match="errors"):
            resolve_connection_string(config, connection_strings={"other": "redis://x"})

    def test_empty_named_entry_falls_through_to_literal(self):
        config = {"connectionStringName": "errors", "connectionString": "Y"}
        assert resolve_connection_string(config, connection_strings={"errors": ""}) == "Y"

    def test_empty_named_entry_falls_through_to_app_key(self):
        config = {"connectionStringName": "errors", "connectionStringAppKey": "K"}
        resolved = resolve_connection_string(
            config, app_settings={"K": "Z"}, connection_strings={"errors": ""}
        )
        assert resolved == "Z"

    def test_table_not_consulted_for_literal(self):
        config = {"connectionString": "Y"}
        assert resolve_connection_string(config, connection_strings={}) == "Y"


class TestInvalidConfig:
    def test_none_config_raises(self):
        with pytest.raises(ConfigurationError):
            resolve_connection_string(None)

    def test_non_string_value_raises(self):
        with pytest.raises(ConfigurationError):
            resolve_connection_string({"connectionString": 6379})
