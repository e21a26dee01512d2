from . import chart, health

__all__ = ["chart", "health"]
