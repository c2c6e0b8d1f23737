"""Core of a small layered game engine: events, layers, timing, a headless window, input and render descriptors."""

__version__ = "0.1.0"