"""Send text between processes one bit at a time using SIGUSR1 and SIGUSR2,
with small helpers for characters, buffers, strings, lists and output."""

__version__ = "0.1.0"