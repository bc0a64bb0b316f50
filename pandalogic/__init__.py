"""Logic elements, gates, memory elements and layout helpers for simulating digital circuits."""

__version__ = "4.2.0"

__all__ = ["gates", "layout", "legacy", "logic", "memory", "properties", "view"]