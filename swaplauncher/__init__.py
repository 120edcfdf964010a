"""Interactive toolchain bootstrapper and integration-test launcher."""

__version__ = "0.1.0"
