"""
Core formatting & parsing primitives.

This module contains the pure building blocks that are independent
of framework glue (casts, guards, middleware, etc.).
"""
