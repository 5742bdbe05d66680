"""
Shared fixtures:
- Deterministic key pairs from known secret seeds
- Credit assets issued by those key pairs
"""
import pytest

from stellar_operations import Asset, KeyPair


@pytest.fixture
def keypair0():
    """Key pair for GDQNY3PBOJOKYZSRMK2S7LHHGWZIUISD4QORETLMXEWXBI7KFZZMKTL3."""
    return KeyPair.from_secret_seed("SBPQUZ6G4FZNWFHKUWC5BEYWF6R52E3SEP7R3GWYSM2XTKGF5LNTWW4R")


@pytest.fixture
def keypair1():
    return KeyPair.from_secret_seed("SBMSVD4KKELKGZXHBUQTIROWUAPQASDX7KEJITARP4VMZ6KLUHOGPTYW")


@pytest.fixture
def keypair2():
    return KeyPair.from_secret_seed("SBZVMB74Z76QZ3ZOY7UTDFYKMEGKW5XFJEB6PFKBF4UYSSWHG4EDH7PY")


@pytest.fixture
def usd_asset(keypair1):
    """alphanum4 credit asset."""
    return Asset.credit("USD", keypair1.public_key)


@pytest.fixture
def long_asset(keypair2):
    """alphanum12 credit asset."""
    return Asset.credit("LONGCODE1234", keypair2.public_key)
