"""stackmix - combine project templates and preview the result."""

__version__ = "0.1.0"
