"""
Exception types for ShaderLab.

Nothing raised here is fatal to the application: every error is caught at
the boundary of the operation that produced it and degraded to a visible but
harmless state (placeholder text, unmodified preview, or a skipped row).
"""


class ShaderLabError(Exception):
    """Base class for all ShaderLab errors."""


class FilterExecutionError(ShaderLabError):
    """A filter failed to produce an output image."""

    def __init__(self, filter_name: str, message: str = ""):
        self.filter_name = filter_name
        detail = f": {message}" if message else ""
        super().__init__(f"Filter {filter_name} failed{detail}")


class ImageDecodeError(ShaderLabError):
    """An image file could not be read or decoded."""
