"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from reachability.config.logging import (
    PACKAGE_LOGGER,
    _describe_start,
    configure_logging,
    operation_context,
)
from reachability.config.settings import ReachSettings
from reachability.domain.graphs import Professional, Vertex
from reachability.services.reachability import ReachabilityService


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("reachability.test")
        log.warning("json test", visited=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["visited"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "reachability.test"
        assert "timestamp" in parsed

    def test_stdlib_package_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("reachability.services.reachability").debug("sorted_ids from 1")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "sorted_ids from 1"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "reachability.services.reachability"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("networkx").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_quiets_networkx_when_verbose(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("networkx").level == logging.WARNING


class TestOperationContext:
    def test_binds_op_and_start(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with operation_context("sorted_ids", 7):
            logging.getLogger("reachability.services.reachability").debug("walked")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "walked"
        assert parsed["op"] == "sorted_ids"
        assert parsed["start"] == 7

    def test_unbinds_on_exit(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with operation_context("odd_count"):
            pass
        structlog.get_logger("reachability.test").warning("after")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "op" not in parsed
        assert "start" not in parsed

    def test_start_rendering(self) -> None:
        assert _describe_start(3) == 3
        assert _describe_start(Vertex(0)) == 0
        assert _describe_start(Professional("Acme", name="Ada")) == "Ada"
        assert _describe_start(Professional("Acme")) == "Acme"

    def test_service_failure_log_carries_op(
        self, capfd: pytest.CaptureFixture[str], settings: ReachSettings
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        result = ReachabilityService(settings).sorted_ids({1: None}, 1)
        assert not result.ok
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "reachability.services.base"
        assert parsed["op"] == "sorted_ids"
        assert parsed["start"] == 1
