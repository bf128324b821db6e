"""
Configuration loading and validation.

Provides strongly typed settings objects for logging and pagination defaults,
loaded from environment variables with upfront validation.
"""
