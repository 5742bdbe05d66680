"""
Strict Parity Helper

Byte-exact comparison of encoded operations against known wire vectors.
"""


def assert_hex_equal(actual: bytes, expected_hex: str, ctx: str) -> None:
    """
    Assert that actual bytes match expected hex string with a readable diff.

    Args:
        actual: Actual bytes to compare
        expected_hex: Expected hex string (spaces allowed)
        ctx: Context string for error messages

    Raises:
        AssertionError: If bytes don't match
    """
    expected = bytes.fromhex(expected_hex.replace(" ", ""))
    if actual == expected:
        return

    lines = [f"Binary parity mismatch in {ctx}",
             f"expected {len(expected)} bytes, got {len(actual)}"]

    # XDR is 4-byte aligned, so compare word by word
    for i in range(0, max(len(expected), len(actual)), 4):
        exp_word = expected[i:i + 4]
        act_word = actual[i:i + 4]
        if exp_word != act_word:
            lines.append(f"first difference at offset {i}: expected {exp_word.hex()} got {act_word.hex()}")
            break

    raise AssertionError("\n".join(lines))
