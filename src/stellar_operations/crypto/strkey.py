"""
StrKey text encoding for Stellar keys.

A StrKey is base32(version_byte || payload || crc16_xmodem_le(version_byte || payload))
without padding. The version byte selects the leading character: G for
account ids, M for muxed accounts, S for secret seeds.
"""

from __future__ import annotations
import base64
import binascii
from enum import IntEnum

from ..runtime.errors import InvalidStrKeyError


class VersionByte(IntEnum):
    ACCOUNT_ID = 6 << 3
    MUXED_ACCOUNT = 12 << 3
    SEED = 18 << 3
    PRE_AUTH_TX = 19 << 3
    SHA256_HASH = 23 << 3


PAYLOAD_SIZES = {
    VersionByte.ACCOUNT_ID: 32,
    VersionByte.MUXED_ACCOUNT: 40,
    VersionByte.SEED: 32,
    VersionByte.PRE_AUTH_TX: 32,
    VersionByte.SHA256_HASH: 32,
}


def crc16_xmodem(data: bytes) -> int:
    """CRC-16/XMODEM: polynomial 0x1021, initial value 0."""
    crc = 0
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def encode_check(version: VersionByte, payload: bytes) -> str:
    """
    Encode payload as a StrKey.

    Args:
        version: Version byte selecting the key kind
        payload: Raw key bytes

    Returns:
        StrKey text
    """
    expected = PAYLOAD_SIZES[version]
    if len(payload) != expected:
        raise InvalidStrKeyError(
            f"{version.name} payload must be {expected} bytes, got {len(payload)}"
        )
    data = bytes([version]) + payload
    checksum = crc16_xmodem(data).to_bytes(2, "little")
    return base64.b32encode(data + checksum).decode("ascii").rstrip("=")


def decode_check(version: VersionByte, text: str) -> bytes:
    """
    Decode a StrKey and verify its version byte and checksum.

    Args:
        version: Expected version byte
        text: StrKey text

    Returns:
        Raw payload bytes

    Raises:
        InvalidStrKeyError: If the text is malformed
    """
    if not isinstance(text, str):
        raise InvalidStrKeyError(f"StrKey must be a string, got {type(text).__name__}")
    padded = text + "=" * (-len(text) % 8)
    try:
        decoded = base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise InvalidStrKeyError(f"StrKey is not valid base32: {text!r}", cause=e)

    expected = PAYLOAD_SIZES[version]
    if len(decoded) != expected + 3:
        raise InvalidStrKeyError(
            f"{version.name} StrKey decodes to {len(decoded)} bytes, expected {expected + 3}"
        )
    if decoded[0] != version:
        raise InvalidStrKeyError(
            f"StrKey version byte {decoded[0]} does not match {version.name}",
            details={"strkey": text},
        )

    data, checksum = decoded[:-2], decoded[-2:]
    if crc16_xmodem(data).to_bytes(2, "little") != checksum:
        raise InvalidStrKeyError("StrKey checksum mismatch", details={"strkey": text})
    # Reject texts whose unused trailing bits are set.
    if encode_check(version, data[1:]) != text:
        raise InvalidStrKeyError("StrKey is not canonically encoded", details={"strkey": text})
    return data[1:]


def is_valid(version: VersionByte, text: str) -> bool:
    try:
        decode_check(version, text)
    except InvalidStrKeyError:
        return False
    return True


__all__ = [
    "VersionByte",
    "crc16_xmodem",
    "encode_check",
    "decode_check",
    "is_valid",
]
