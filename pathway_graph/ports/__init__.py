"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the analysis service and the
adapters that feed it, so each side can be swapped in tests.
"""

from .cache import CachePort
from .graph import DrugLookupPort, InteractionRepositoryPort

__all__ = [
    # Graph
    "InteractionRepositoryPort",
    "DrugLookupPort",
    # Cache
    "CachePort",
]
