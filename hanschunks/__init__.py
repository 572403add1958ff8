"""Structure-aware chunking of Chinese and mixed-language text elements."""

__version__ = "0.1.0"