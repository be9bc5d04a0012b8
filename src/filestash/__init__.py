"""filestash - save, read and search text files under a base directory."""

__version__ = "0.1.0"
