"""
Core of bigdecimal: integer primitives, the decimal value type, and contracts.

This package is independent of any I/O; every operation is a pure function
over immutable values.
"""
