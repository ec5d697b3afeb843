# File: tests/test_logger.py
import logging

from link_checker.logger import LOGGER_NAME, configure


def test_configure_writes_thread_name_to_log_file(tmp_path):
    log_file = tmp_path / "crawl.log"
    lg = configure(level="DEBUG", log_file=log_file)
    lg.debug("fetched %s", "https://ex.com/")

    assert log_file.read_text(encoding="utf-8").rstrip().endswith("| MainThread | fetched https://ex.com/")


def test_configure_replaces_handlers():
    configure(level="INFO")
    lg = configure(level="WARNING")

    assert lg is logging.getLogger(LOGGER_NAME)
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING
    assert not lg.propagate
