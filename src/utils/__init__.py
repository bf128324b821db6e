"""
Generic utility functions.

Includes string helpers, timestamp arithmetic, integer and float-array math,
the clock abstraction, a stopwatch, pagination helpers, logging setup and
error classes.
"""
