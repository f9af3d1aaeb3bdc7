"""
Low-level helpers shared by the timestamps, numbers and colors modules.

Includes the clock abstraction, double-precision arithmetic helpers, and the
argument validation layer with its error class.
"""
