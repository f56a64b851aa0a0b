"""Tests for StructlogAdapter and configure_logging."""

import logging

import pytest
import structlog

from proxify.core.config import Config
from proxify.logging import configure_logging
from proxify.logging.structlog_adapter import LIBRARY_LOGGER, StructlogAdapter
from proxify.proxy.weaver import intercept


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    logging.getLogger("proxify.proxy").setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config())
        assert adapter._root_level == "WARNING"
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.WARNING

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"proxify": {"logging": {"level": {"root": "DEBUG"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.DEBUG

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"proxify": {"logging": {"level": {"proxify.proxy": "info"}}}}))
        assert logging.getLogger("proxify.proxy").level == logging.INFO

    def test_reconfigure_replaces_handler(self):
        adapter = StructlogAdapter()
        adapter.configure(Config())
        adapter.configure(Config())
        assert len(logging.getLogger(LIBRARY_LOGGER).handlers) == 1

    def test_set_level(self):
        StructlogAdapter().set_level("proxify.proxy.weaver", "error")
        assert logging.getLogger("proxify.proxy.weaver").level == logging.ERROR
        logging.getLogger("proxify.proxy.weaver").setLevel(logging.NOTSET)

    def test_get_logger_returns_structlog_logger(self):
        logger = StructlogAdapter().get_logger("proxify.test")
        assert hasattr(logger, "info")


class TestRendering:
    def test_json_output_for_library_records(self, capsys: pytest.CaptureFixture[str]):
        configure_logging(Config({"proxify": {"logging": {"level": {"root": "DEBUG"}, "format": "json"}}}))

        class Target:
            def welcome(self, name):
                return name

        intercept(Target, ["welcome"], lambda call, name: call.proceed(name))
        out = capsys.readouterr().out
        assert '"event": "Intercepted' in out
        assert '"logger": "proxify.proxy.weaver"' in out

    def test_warning_level_hides_debug_records(self, capsys: pytest.CaptureFixture[str]):
        configure_logging()

        class Target:
            def welcome(self, name):
                return name

        intercept(Target, ["welcome"], lambda call, name: call.proceed(name))
        assert "Intercepted" not in capsys.readouterr().out

    def test_configure_logging_uses_given_adapter(self):
        calls = []

        class Recording:
            def configure(self, config):
                calls.append(config)

            def get_logger(self, name):
                return None

            def set_level(self, name, level):
                pass

        adapter = Recording()
        assert configure_logging(adapter=adapter) is adapter
        assert isinstance(calls[0], Config)
