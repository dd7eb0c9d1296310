"""A tile game: collect every item on a walled map, then reach the exit."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "mapfile", "pathcheck", "game", "render"]