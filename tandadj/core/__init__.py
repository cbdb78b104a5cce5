"""Core services: catalog, planning pipeline, playlist edits, JSON storage."""
from tandadj.core.catalog import TrackCatalog
from tandadj.core.pipeline import generate_playlist

__all__ = ["TrackCatalog", "generate_playlist"]
