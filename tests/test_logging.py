"""
Tests for logging setup
"""
import logging

import pytest

from tileset_assets.utils.logging import PACKAGE_LOGGER, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def clean_package_logger():
    yield
    reset_logging()


def file_handlers():
    return [h for h in logging.getLogger(PACKAGE_LOGGER).handlers
            if isinstance(h, logging.FileHandler)]


class TestSetupLogging:

    def test_creates_log_file(self, tmp_path):
        log_file = setup_logging(str(tmp_path / "logs"))
        assert log_file.parent == tmp_path / "logs"
        assert log_file.exists()
        assert len(file_handlers()) == 1

    def test_second_call_closes_previous_file(self, tmp_path):
        setup_logging(str(tmp_path / "first"))
        first, = file_handlers()

        setup_logging(str(tmp_path / "second"))

        assert first.stream is None or first.stream.closed
        assert first not in logging.getLogger(PACKAGE_LOGGER).handlers
        assert len(file_handlers()) == 1

    def test_root_handlers_untouched(self, tmp_path):
        root_logger = logging.getLogger()
        before = list(root_logger.handlers)
        setup_logging(str(tmp_path / "logs"))
        assert root_logger.handlers == before

    def test_records_reach_log_file(self, tmp_path):
        log_file = setup_logging(str(tmp_path / "logs"), logging.DEBUG)
        logging.getLogger('tileset_assets.loader').info("decoded badlands")
        handler, = file_handlers()
        handler.flush()
        assert "decoded badlands" in log_file.read_text(encoding='utf-8')
