"""Component-based 2D game engine on pygame: game objects, animation, input, Tiled maps, quadtree collisions and scenes."""

__version__ = "0.1.0"