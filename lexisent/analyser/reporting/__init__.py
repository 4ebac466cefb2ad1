"""Rendering and writing of scored tweets."""

from .result_presenter import ResultPresenter

__all__ = [
    'ResultPresenter'
]
