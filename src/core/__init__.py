"""
Core containers and invariants.

This module contains the foundational building blocks: a fixed-length
dynamic vector and a square matrix composed of vector rows.
"""
