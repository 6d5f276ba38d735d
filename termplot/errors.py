from __future__ import annotations


class TermplotError(Exception):
    """Base error for the termplot package."""


class PlotDataError(TermplotError, ValueError):
    """Raised when coordinate input cannot be rasterized as given."""


class RendererNotConfiguredError(TermplotError, NotImplementedError):
    """Raised when a canvas is rendered without a cell renderer."""
