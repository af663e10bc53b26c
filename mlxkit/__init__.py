"""In-memory RGBA images with a window-like event loop, image loaders, and string and memory helpers."""

__version__ = "0.1.0"