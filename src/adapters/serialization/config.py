from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

ByteOrder = Literal["native", "little", "big"]

_STRUCT_PREFIX: dict[str, str] = {
    "native": "=",
    "little": "<",
    "big": ">",
}


def _env_byte_order(name: str, default: ByteOrder = "native") -> ByteOrder:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in _STRUCT_PREFIX:
        logger.warning(
            "Unrecognised %s=%r; using %s byte order", name, raw, default
        )
        return default
    return value  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class CodecConfig:
    byte_order: ByteOrder = "native"

    @staticmethod
    def from_env() -> "CodecConfig":
        return CodecConfig(byte_order=_env_byte_order("GEOPOINT_BYTE_ORDER"))

    def struct_prefix(self) -> str:
        """Return the :mod:`struct` byte-order character for this config.

        ``native`` maps to ``=`` (platform order, standard sizes) so the record
        stays exactly 24 bytes regardless of alignment rules.
        """

        return _STRUCT_PREFIX[self.byte_order]
