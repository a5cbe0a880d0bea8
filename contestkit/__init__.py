"""Solved competitive programming problems as plain Python functions, with a command line front end."""

__version__ = "0.1.0"