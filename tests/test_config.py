"""Tests for configuration and logging setup."""

import logging

from form_studio.config import FormStudioConfig, get_config, update_config
from form_studio.logs import LOGGER_NAME, disable_logging, setup_logging


class TestConfig:
    """Tests for FormStudioConfig."""

    def test_from_env(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("FORM_STUDIO_API_URL", "https://forms.example.com/api")
        monkeypatch.setenv("FORM_STUDIO_SUMMARY_FIELDS", "4")
        monkeypatch.setenv("FORM_STUDIO_LOG_LEVEL", "debug")
        config = FormStudioConfig.from_env()
        assert config.api_base_url == "https://forms.example.com/api"
        assert config.summary_field_count == 4
        assert config.log_level == "DEBUG"
        assert config.default_col_span == 12

    def test_update_config(self):
        """Test update_config changes known keys and ignores unknown ones."""
        original = get_config().textarea_rows
        try:
            config = update_config(textarea_rows=5, not_a_setting=1)
            assert config.textarea_rows == 5
            assert not hasattr(config, "not_a_setting")
        finally:
            update_config(textarea_rows=original)


class TestLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path):
        """Test records are written to the log file."""
        log_file = tmp_path / "studio.log"
        logger = setup_logging(console=False, verbose=True, file_path=str(log_file))
        try:
            logging.getLogger(f"{LOGGER_NAME}.client").debug("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "form_studio.client - DEBUG - hello" in log_file.read_text()
        finally:
            setup_logging(console=False)

    def test_disable(self):
        """Test logging can be switched off."""
        logger = setup_logging(enabled=False)
        assert logger.disabled
        setup_logging(console=False)
        assert not logging.getLogger(LOGGER_NAME).disabled
        disable_logging()
        assert logging.getLogger(LOGGER_NAME).disabled
        setup_logging(console=False)
