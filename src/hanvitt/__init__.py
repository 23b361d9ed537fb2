"""Hanvitt: financial calculators and client intake for an advisory practice."""

__version__ = "0.1.0"
