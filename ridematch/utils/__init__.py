"""Utility helpers used across ridematch.

This package contains small, self-contained utilities that do not depend on
project internals.
"""
