"""JSON and MessagePack encoding/decoding of distribution requests.

Decoding validates twice: msgspec enforces the per-field constraints from
``pseudo_rand.types`` while parsing, then the request's own ``validate()``
covers cross-field rules. Every failure surfaces as InvalidParameterError.

Thread Safety:
    - Encoders are NOT thread-safe -> thread-local instances
    - Decoders ARE thread-safe (reentrant) -> shared

Usage:
    >>> from pseudo_rand.codec import decode_json, encode_json
    >>> request = decode_json(b'{"type": "Exponential", "rate": 2.0}')
    >>> request
    Exponential(rate=2.0)
    >>> encode_json(request)
    b'{"type":"Exponential","rate":2.0}'
"""

from __future__ import annotations

import threading

import msgspec

from pseudo_rand.distributions import DistributionRequest
from pseudo_rand.errors import InvalidParameterError

__all__ = [
    'decode_json',
    'decode_msgpack',
    'encode_json',
    'encode_msgpack',
]

_json_decoder: msgspec.json.Decoder[DistributionRequest] = msgspec.json.Decoder(DistributionRequest)
_msgpack_decoder: msgspec.msgpack.Decoder[DistributionRequest] = msgspec.msgpack.Decoder(DistributionRequest)

_local = threading.local()


def _json_encoder() -> msgspec.json.Encoder:
    encoder = getattr(_local, 'json', None)
    if encoder is None:
        encoder = msgspec.json.Encoder()
        _local.json = encoder
    return encoder


def _msgpack_encoder() -> msgspec.msgpack.Encoder:
    encoder = getattr(_local, 'msgpack', None)
    if encoder is None:
        encoder = msgspec.msgpack.Encoder()
        _local.msgpack = encoder
    return encoder


def _decode_error(exc: msgspec.DecodeError) -> InvalidParameterError:
    """Map a msgspec error to InvalidParameterError.

    msgspec reports the offending location as a suffix like `` - at `$.rate` ``;
    the field name becomes the parameter, the rest becomes the reason.
    """
    message = str(exc)
    reason, sep, location = message.rpartition(' - at `')
    if not sep:
        return InvalidParameterError('request', '$', message)
    parameter = location.rstrip('`').removeprefix('$').lstrip('.') or '$'
    return InvalidParameterError('request', parameter, reason)


def _checked(request: DistributionRequest) -> DistributionRequest:
    request.validate()
    return request


def decode_json(data: bytes | str) -> DistributionRequest:
    """Decode and validate a JSON request.

    Raises:
        InvalidParameterError: Malformed payload, unknown kind, or a parameter
            outside its domain.
    """
    try:
        request = _json_decoder.decode(data)
    except msgspec.DecodeError as e:
        raise _decode_error(e) from e
    return _checked(request)


def decode_msgpack(data: bytes) -> DistributionRequest:
    """Decode and validate a MessagePack request.

    Raises:
        InvalidParameterError: Malformed payload, unknown kind, or a parameter
            outside its domain.
    """
    try:
        request = _msgpack_decoder.decode(data)
    except msgspec.DecodeError as e:
        raise _decode_error(e) from e
    return _checked(request)


def encode_json(request: DistributionRequest) -> bytes:
    """Encode a request to JSON bytes."""
    return _json_encoder().encode(request)


def encode_msgpack(request: DistributionRequest) -> bytes:
    """Encode a request to MessagePack bytes."""
    return _msgpack_encoder().encode(request)
