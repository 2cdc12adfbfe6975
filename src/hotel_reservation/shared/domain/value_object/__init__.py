from .identity import Identity
from .money import Money

__all__ = ["Identity", "Money"]
