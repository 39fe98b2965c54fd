"""Personal portfolio site: FastAPI backend for the single-page frontend."""

__version__ = "0.1.0"
