"""dupfinder - find and move files that share a name across two directory trees."""

__version__ = "1.0.0"
