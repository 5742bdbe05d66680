"""
Decoder options for the XDR codec.
"""

from dataclasses import dataclass

UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class CodecOptions:
    """Configuration for XdrReader."""
    # Ceiling applied to every variable-length prefix, on top of the
    # per-field bound declared by the protocol.
    max_var_length: int = UINT32_MAX
    # XDR requires padding bytes to be zero.
    strict_padding: bool = True

    def __post_init__(self):
        if not 0 <= self.max_var_length <= UINT32_MAX:
            raise ValueError(f"max_var_length must be within 0..{UINT32_MAX}, got {self.max_var_length}")


DEFAULT_OPTIONS = CodecOptions()
