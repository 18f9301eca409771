"""Unit tests for the configuration context."""

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import AppContext, get_config, get_context, with_context


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_default_context_reads_environment(self):
        config = get_config()

        assert config.database.dialect == "sqlite"
        assert config.database.name == ":memory:"
        assert config.app.port == 8080
        assert config.app.environment == "test"

    def test_with_context_overrides_and_reverts(self):
        original = get_config()

        override = ConfigData()
        override.database.name = "/tmp/other.db"

        with with_context(override):
            config = get_config()
            assert config.database.name == "/tmp/other.db"
            # Fields not set on the override are inherited
            assert config.database.dialect == "sqlite"
            assert config.app.environment == "test"

        assert get_config() is original

    def test_with_context_none_is_a_no_op(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original
