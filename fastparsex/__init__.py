"""Readers for CSV, log and binary files, with an export stub and timing helpers."""

__version__ = "1.0.0"