"""QPush Gateway - push-queue notification ingestion and dispatch."""

__version__ = "0.1.0"
