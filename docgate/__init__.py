"""Decide whether OCR-extracted text matches a known reference document."""

__version__ = "1.0.0"
