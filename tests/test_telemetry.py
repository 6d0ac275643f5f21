from __future__ import annotations

import pytest

from grid_engine.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_config_and_preset_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_loggers_are_cached_per_name() -> None:
    first = telemetry.get_logger("grid_engine.test")

    assert telemetry.get_logger("grid_engine.test") is first


def test_span_reraises_body_errors() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component="tests") as handle:
            handle.add_metadata("step", 1)
            raise RuntimeError("boom")
