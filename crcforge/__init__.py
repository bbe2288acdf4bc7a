"""Configurable CRC-8/12/16/32/64 calculators, a fast CRC-32 and parameter presets."""

__version__ = "1.0.1"
__all__ = ["crc", "fastcrc32", "functions", "parameters", "reverse"]