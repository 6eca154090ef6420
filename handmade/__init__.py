"""Game-loop prototype: a gradient renderer, a sine-tone generator and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["game", "sound", "platform"]