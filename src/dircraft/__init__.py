"""DirCraft: build directory structures from ASCII tree diagrams."""

__version__ = "0.2.0"
