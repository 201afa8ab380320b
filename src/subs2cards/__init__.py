from __future__ import annotations

from .config import EnrichConfig, ParseConfig
from .pipeline import EnrichPipeline, ParsePipeline

__all__ = ["EnrichConfig", "ParseConfig", "EnrichPipeline", "ParsePipeline"]

__version__ = "0.1.0"
