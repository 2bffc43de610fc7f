"""Package-level smoke tests"""


def test_version_exists():
    """Verify package version is defined"""
    import trading_bot_manager
    assert hasattr(trading_bot_manager, '__version__')
    assert trading_bot_manager.__version__ == "1.0.0"


def test_public_api_importable():
    """Test that the public entry points can be imported from the package root."""
    from trading_bot_manager import (
        ConfigManager,
        Instance,
        InstanceProcess,
        ManagerConfig,
        ProcessInvocationError,
    )

    assert issubclass(ProcessInvocationError, RuntimeError)
    assert all([ConfigManager, Instance, InstanceProcess, ManagerConfig])
