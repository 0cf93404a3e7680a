"""Aexis Zero -- interactive scaffolder for Next.js and Expo apps."""

__version__ = "0.1.0"
