"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVInteractionRepository: Loads the interaction graph from CSV
- CSVDrugLookup: Resolves drugs to target and destination proteins
"""

from .csv_repository import CSVDrugLookup, CSVInteractionRepository

__all__ = ["CSVInteractionRepository", "CSVDrugLookup"]
