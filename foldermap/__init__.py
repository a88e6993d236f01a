"""A tree-shaped mind map whose nodes are folders on disk, with a Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]