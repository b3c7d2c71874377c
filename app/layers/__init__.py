"""Layers package initialization."""
from app.layers.acquisition import AcquisitionLayer
from app.layers.extraction import ExtractionLayer, extract_metadata

__all__ = [
    "AcquisitionLayer",
    "ExtractionLayer",
    "extract_metadata",
]
