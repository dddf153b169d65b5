from .resolve import resolve
from .factor import factor

__all__ = ["resolve", "factor"]
