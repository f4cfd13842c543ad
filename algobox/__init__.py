"""Graph, dynamic-programming and string algorithms with a small command line front end."""

__version__ = "0.1.0"