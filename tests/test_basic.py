"""
Basic sanity tests for package setup
"""

import rustlike


def test_version():
    """Test that version is defined"""
    assert hasattr(rustlike, "__version__")
    assert rustlike.__version__ == "0.1.0"


def test_import():
    """Test that package can be imported"""
    import rustlike.cli.formatters
    import rustlike.cli.main
    import rustlike.containers.ring_deque
    import rustlike.core.iterator
    import rustlike.operators

    # All subpackages should be importable
    assert rustlike is not None


def test_public_api():
    """Test that the main API is exported at the top level"""
    for name in rustlike.__all__:
        assert hasattr(rustlike, name)
