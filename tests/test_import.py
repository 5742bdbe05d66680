"""
Test basic import functionality.
"""


def test_main_import():
    """Test that main module can be imported."""
    import stellar_operations
    assert hasattr(stellar_operations, "__version__")
    assert stellar_operations.__version__ == "0.1.0"


def test_public_names_exported():
    """Every name in __all__ resolves."""
    import stellar_operations
    for name in stellar_operations.__all__:
        assert hasattr(stellar_operations, name), name


def test_builder_entry_points():
    """Test that each builder function returns a fresh builder."""
    from stellar_operations import account_merge, create_account, inflation, path_payment_strict_receive, payment

    for factory in (create_account, payment, path_payment_strict_receive, account_merge, inflation):
        assert factory() is not factory()
