from __future__ import annotations

import logging

import pytest

from src.adapters.serialization.config import CodecConfig


def test_defaults_to_native_byte_order(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEOPOINT_BYTE_ORDER", raising=False)

    cfg = CodecConfig.from_env()

    assert cfg.byte_order == "native"
    assert cfg.struct_prefix() == "="


@pytest.mark.parametrize(
    ("raw", "order", "prefix"),
    [("little", "little", "<"), (" BIG ", "big", ">"), ("Native", "native", "=")],
)
def test_reads_byte_order_from_env(
    monkeypatch: pytest.MonkeyPatch, raw: str, order: str, prefix: str
) -> None:
    monkeypatch.setenv("GEOPOINT_BYTE_ORDER", raw)

    cfg = CodecConfig.from_env()

    assert cfg.byte_order == order
    assert cfg.struct_prefix() == prefix


def test_unknown_byte_order_falls_back_with_warning(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("GEOPOINT_BYTE_ORDER", "middle")

    with caplog.at_level(logging.WARNING):
        cfg = CodecConfig.from_env()

    assert cfg.byte_order == "native"
    assert "GEOPOINT_BYTE_ORDER" in caplog.text
