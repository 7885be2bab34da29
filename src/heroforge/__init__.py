"""heroforge: data-driven hero creation with layered stat composition."""

__version__ = "0.1.0"
