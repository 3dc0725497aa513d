"""Testes do contexto de dispatch, métricas e hook de trace."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from app.observability import (
    DispatchTraceEvent,
    TraceStage,
    dispatch_context,
    emit_trace,
    get_correlation_id,
    get_dispatch_bot_type,
    record_dispatch,
    record_event_dropped,
)


def test_dispatch_context_sets_and_restores_values() -> None:
    with dispatch_context("slack", correlation_id="corr-1") as correlation_id:
        assert correlation_id == "corr-1"
        assert get_correlation_id() == "corr-1"
        assert get_dispatch_bot_type() == "slack"
    assert get_correlation_id() == ""
    assert get_dispatch_bot_type() == ""


def test_dispatch_context_generates_fresh_ids() -> None:
    with dispatch_context("discord") as first:
        pass
    with dispatch_context("discord") as second:
        pass
    assert len(first) == 32
    assert first != second


def test_nested_context_restores_outer() -> None:
    with dispatch_context("slack", "outer"):
        with dispatch_context("discord", "inner"):
            assert get_correlation_id() == "inner"
        assert get_correlation_id() == "outer"
        assert get_dispatch_bot_type() == "slack"


def test_metrics_are_structured_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="app.observability.metrics"):
        record_dispatch("slack", "matched", 12.3456)
        record_event_dropped("discord")

    dispatch, dropped = caplog.records[-2:]
    assert dispatch.metric_type == "dispatch"
    assert dispatch.latency_ms == 12.35
    assert dispatch.outcome == "matched"
    assert dropped.metric_type == "event_dropped"
    assert dropped.bot_type == "discord"


def test_emit_trace_without_hook_is_noop() -> None:
    emit_trace(None, DispatchTraceEvent(stage=TraceStage.EVENT_DROPPED, bot_type="slack"))


def test_emit_trace_logs_hook_failure(caplog: pytest.LogCaptureFixture) -> None:
    hook = MagicMock(side_effect=RuntimeError("x"))
    event = DispatchTraceEvent(stage=TraceStage.DISPATCH_STARTED, bot_type="discord")

    with caplog.at_level(logging.WARNING, logger="app.observability.tracing"):
        emit_trace(hook, event)

    hook.assert_called_once_with(event)
    assert caplog.records[-1].getMessage() == "trace_hook_failed"
