"""ShaderLab: browse image filters and preview them on a sample image."""

__version__ = "0.1.0"
