import importlib
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from loguru import logger

from lexrel.config import Settings, settings
import lexrel.utils.logger
from lexrel.utils.logger import setup_logging


class TestSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LEXREL_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LEXREL_LOG_FILE", raising=False)
        monkeypatch.delenv("LEXREL_LOG_REVERSALS", raising=False)

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.log_dir is None
        assert config.log_reversals is False

    def test_environment(self, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "lexrel.log"
        monkeypatch.setenv("LEXREL_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEXREL_LOG_FILE", str(log_file))
        monkeypatch.setenv("LEXREL_LOG_REVERSALS", "true")

        config = Settings(_env_file=None)
        config.ensure_directories()

        assert config.log_level == "DEBUG"
        assert config.log_reversals is True
        assert config.log_dir == log_file.parent
        assert log_file.parent.is_dir()


class TestLogging:
    """Test logger setup and reversal logging."""

    def teardown_method(self):
        # Back to the loguru default sink.
        logger.remove()
        logger.add(sys.stderr)

    def test_import_keeps_existing_sinks(self):
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            importlib.reload(lexrel.utils.logger)
            lexrel.utils.logger.app_logger.bind(component="test").info("host sink check")

            assert any("host sink check" in m for m in messages)
        finally:
            logger.remove(sink_id)

    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "nested" / "lexrel.log"

        setup_logging("DEBUG", str(log_file))
        logger.bind(component="test").info("file sink check")
        # Dropping the sinks closes the log file.
        setup_logging("DEBUG")

        assert log_file.exists()
        assert "file sink check" in log_file.read_text(encoding="utf-8")

    def test_reversal_is_logged_when_enabled(self, dog_to_cat, monkeypatch):
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            monkeypatch.setattr(settings, "log_reversals", False)
            dog_to_cat.reverse()
            assert not any("Reversed" in m for m in messages)

            monkeypatch.setattr(settings, "log_reversals", True)
            dog_to_cat.reverse()
            assert any("Reversed hypernym relationship" in m for m in messages)
        finally:
            logger.remove(sink_id)
