from .factories import account_bytes, int32, int64, mk_keypair, mk_sample_operations, mk_unmodeled_bodies
from .parity import assert_hex_equal

__all__ = [
    "account_bytes",
    "int32",
    "int64",
    "mk_keypair",
    "mk_sample_operations",
    "mk_unmodeled_bodies",
    "assert_hex_equal",
]
