"""Fixed 24-byte transport record for :class:`GeoPoint`.

Layout: three IEEE-754 doubles, latitude, longitude, altitude. Writer and
reader must agree on the byte order (see :class:`CodecConfig`).
"""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

from src.adapters.serialization.config import CodecConfig
from src.domain.exceptions import InvalidArgument
from src.domain.models import GeoPoint

logger = logging.getLogger(__name__)

RECORD_SIZE = 24


def _record_struct(config: CodecConfig | None) -> struct.Struct:
    cfg = config or CodecConfig.from_env()
    return struct.Struct(cfg.struct_prefix() + "ddd")


def encode(point: GeoPoint, *, config: CodecConfig | None = None) -> bytes:
    return _record_struct(config).pack(
        point.latitude, point.longitude, point.altitude
    )


def decode(data: bytes, *, config: CodecConfig | None = None) -> GeoPoint:
    """Rebuild a point from a record, running the usual coordinate checks."""

    if len(data) != RECORD_SIZE:
        logger.debug("Rejected GeoPoint record of %d bytes", len(data))
        raise InvalidArgument(
            f"GeoPoint record must be {RECORD_SIZE} bytes, got {len(data)}"
        )

    latitude, longitude, altitude = _record_struct(config).unpack(data)
    try:
        return GeoPoint(latitude, longitude, altitude)
    except InvalidArgument:
        logger.debug(
            "Rejected GeoPoint record", extra={"lat": latitude, "lon": longitude}
        )
        raise


def write_to(
    stream: BinaryIO, point: GeoPoint, *, config: CodecConfig | None = None
) -> None:
    stream.write(encode(point, config=config))


def read_from(stream: BinaryIO, *, config: CodecConfig | None = None) -> GeoPoint:
    return decode(stream.read(RECORD_SIZE), config=config)
