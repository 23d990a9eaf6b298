"""Seam carving for uncompressed 24-bit BMP images: BMP reading and writing, seam removal, a stopwatch and a command line entry."""

__version__ = "0.1.0"
__all__ = ["bitmap", "carver", "cli", "timer"]