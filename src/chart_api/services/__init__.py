from . import chart as chartService
from . import health as healthService

__all__ = ["chartService", "healthService"]
