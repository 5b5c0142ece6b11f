"""JobPortal API - job board backend."""
__version__ = "1.0.0"
