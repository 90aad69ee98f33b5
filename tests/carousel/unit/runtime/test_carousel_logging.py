from __future__ import annotations

import logging

from carousel.api.layout import Column
from carousel.layout.boundary import mix_scroll
from carousel.runtime.logging import get_carousel_logger, trace_calculation


def test_get_carousel_logger_namespaces_names() -> None:
    assert get_carousel_logger("carousel.layout").name == "carousel.layout"
    assert get_carousel_logger("carousel").name == "carousel"
    assert get_carousel_logger("host").name == "carousel.host"


def test_package_logger_has_null_handler_and_leaves_root_alone() -> None:
    package_logger = logging.getLogger("carousel")
    assert any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)
    assert not any(isinstance(handler, logging.NullHandler) for handler in logging.getLogger().handlers)


def test_trace_calculation_respects_flag(monkeypatch, caplog) -> None:
    logger = logging.getLogger("carousel.layout")
    with caplog.at_level(logging.DEBUG, logger="carousel.layout"):
        monkeypatch.delenv("CAROUSEL_DEBUG_TRACE", raising=False)
        trace_calculation(logger, "page_scroll", focus=1)
        assert not caplog.records
        monkeypatch.setenv("CAROUSEL_DEBUG_TRACE", "1")
        trace_calculation(logger, "page_scroll", focus=1)
    assert [record.operation for record in caplog.records] == ["page_scroll"]


def test_trace_skips_env_lookup_when_debug_is_off(monkeypatch, caplog) -> None:
    def _fail() -> bool:
        raise AssertionError("env read while DEBUG disabled")

    monkeypatch.setattr("carousel.runtime.logging.enabled_trace", _fail)
    with caplog.at_level(logging.INFO, logger="carousel.layout"):
        trace_calculation(logging.getLogger("carousel.layout"), "mix_scroll", focus=2)
    assert not caplog.records


def test_calculators_emit_structured_trace_fields(viewport, monkeypatch, caplog) -> None:
    monkeypatch.setenv("CAROUSEL_DEBUG_TRACE", "1")
    with caplog.at_level(logging.DEBUG, logger="carousel.layout"):
        mix_scroll(
            viewport, [Column(1)] * 20, margin=10, orientation="X", focus=15, unit_width=100, inset=0
        )
    record = caplog.records[-1]
    assert record.operation == "span_boundary_scroll"
    assert (record.last_static, record.overflow, record.position) == (15, 50, "leading")
