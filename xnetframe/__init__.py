"""Network building blocks: TCP/UDP socket wrappers, a TCP channel, binary streams, a blocking queue and helpers."""

__version__ = "0.1.0"