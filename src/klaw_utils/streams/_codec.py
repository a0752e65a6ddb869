"""Chunk to bytes conversion for raw-mode streams and byte buffers."""

from __future__ import annotations

import codecs
from typing import Any

import msgspec

from klaw_utils.errors import InvalidChunkType
from klaw_utils.types import TEXT_TYPES

__all__ = ['coerce_chunk', 'encode_chunk', 'is_structured']

_json_encoder = msgspec.json.Encoder(order='deterministic')


def is_structured(value: Any) -> bool:
    """True for values that need object mode: anything but None, text, or bytes."""
    return value is not None and not isinstance(value, TEXT_TYPES)


def coerce_chunk(chunk: Any, encoding: str) -> bytes:
    """Convert a raw-mode chunk to bytes.

    Text is encoded with `encoding`; bytes-like values are copied into `bytes`.

    Raises:
        NamedError: `InvalidChunkType` for any other value.
    """
    if isinstance(chunk, bytes):
        return chunk
    if isinstance(chunk, str):
        return chunk.encode(encoding)
    if isinstance(chunk, (bytearray, memoryview)):
        return bytes(chunk)
    msg = f'Raw-mode chunks must be str or bytes-like, got {type(chunk).__name__}'
    raise InvalidChunkType(msg, cause=chunk)


def encode_chunk(chunk: Any, encoding: str) -> bytes:
    """Convert any chunk to bytes, encoding structured values as compact JSON.

    JSON text is written in `encoding`, the same as plain text chunks.

    Raises:
        NamedError: `InvalidChunkType` if msgspec cannot encode the value.
    """
    if isinstance(chunk, TEXT_TYPES):
        return coerce_chunk(chunk, encoding)
    try:
        data = _json_encoder.encode(chunk)
    except TypeError as exc:
        msg = f'Cannot encode chunk of type {type(chunk).__name__} to bytes'
        raise InvalidChunkType(msg, cause=exc) from exc
    if codecs.lookup(encoding).name == 'utf-8':
        return data
    return data.decode('utf-8').encode(encoding)
