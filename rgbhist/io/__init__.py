from .bmp_io import read_bmp, write_bmp

__all__ = ["read_bmp", "write_bmp"]
