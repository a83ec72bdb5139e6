"""A frameless analog desktop clock with toolkit-independent face geometry."""

__version__ = "0.1.0"
__all__ = ["__version__"]