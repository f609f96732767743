"""3D vector and 4x4 matrix math, string helpers and a line-oriented text parser."""

__version__ = "0.1.0"