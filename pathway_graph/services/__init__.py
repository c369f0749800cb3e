"""Services layer - Application orchestration.

Available services:
- PathwayAnalysisService: Drug-driven analyses and guarded graph growth
"""

from .pathway_analysis import PathwayAnalysisService, parse_neighbors

__all__ = ["PathwayAnalysisService", "parse_neighbors"]
