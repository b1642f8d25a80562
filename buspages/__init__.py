"""Page ids, message encodings and compressed page archives for a service bus message store."""

__version__ = "0.1.0"