"""A small pseudo operating system: dispatcher, process queues, memory and disk."""

__version__ = "0.1.0"

__all__ = ["dispatcher", "models", "queue", "system"]