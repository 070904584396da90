"""A turn-based text role-playing game about a brave little bird."""

__version__ = "1.0.0"
__all__ = ["character", "combat", "console", "dice", "game"]