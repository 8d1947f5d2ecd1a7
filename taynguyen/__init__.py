"""Tay Nguyen campaign calculations and a runner that checks them against files."""

__version__ = "0.1.0"