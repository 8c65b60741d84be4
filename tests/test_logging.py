"""test_logging.py
Tests for LoggerFactory.
"""
import logging
import sys
import uuid

from resume_engine.logging import LoggerFactory, running_under_pytest


def unique_name() -> str:
    return f"test_logger_{uuid.uuid4().hex}"


class TestLoggerFactory:

    def test_development_logger_writes_to_tests_folder(self, tmp_path):
        logger = LoggerFactory(env="development", base_log_folder=str(tmp_path)).get_logger(unique_name(), console=False)

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / "tests").is_dir()
        assert logger.propagate is False

    def test_handlers_are_not_duplicated(self, tmp_path):
        factory = LoggerFactory(env="development", base_log_folder=str(tmp_path))
        name = unique_name()
        first = factory.get_logger(name)
        second = factory.get_logger(name)

        assert first is second
        assert len(second.handlers) == 2

    def test_console_handler_is_info_level(self, tmp_path):
        logger = LoggerFactory(env="development", base_log_folder=str(tmp_path)).get_logger(unique_name())
        console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert console[0].level == logging.INFO

    def test_logger_levels_by_type(self, tmp_path):
        factory = LoggerFactory(env="development", base_log_folder=str(tmp_path))
        assert factory.get_logger(unique_name(), logger_type="default").level == logging.DEBUG
        assert factory.get_logger(unique_name(), logger_type="extractor").level == logging.INFO

    def test_unknown_env_falls_back_to_stream_handler(self):
        logger = LoggerFactory(env="unknown").get_logger(unique_name(), console=False)
        assert len(logger.handlers) == 1
        assert type(logger.handlers[0]) is logging.StreamHandler

    def test_production_without_watchtower_still_logs(self, mocker):
        mocker.patch.dict(sys.modules, {"watchtower": None})
        logger = LoggerFactory(env="production").get_logger(unique_name(), console=False)
        assert len(logger.handlers) == 1

    def test_root_handlers_do_not_skip_configuration(self, tmp_path):
        root_handler = logging.StreamHandler()
        logging.getLogger().addHandler(root_handler)
        try:
            logger = LoggerFactory(env="development", base_log_folder=str(tmp_path)).get_logger(unique_name())
        finally:
            logging.getLogger().removeHandler(root_handler)

        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_running_under_pytest(self):
        assert running_under_pytest()
