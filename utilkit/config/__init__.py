"""
Configuration loading and validation.

Provides the strongly typed UtilkitSettings object, loaded from environment
variables with upfront validation.
"""
