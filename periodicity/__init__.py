"""A spell-casting role-playing game: an entity-component world, its systems, and a pygame window."""

__version__ = "0.1.0"