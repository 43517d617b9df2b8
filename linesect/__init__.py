"""2D/3D vector types and intersection of lines in parametric form."""

__version__ = "0.1.0"
__all__ = ["line", "vectors"]