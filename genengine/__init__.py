"""Core pieces of a small game engine: logging, versions, frame timing, files, swapchain selection and a source formatter."""

__version__ = "0.0.1"