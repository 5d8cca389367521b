"""
Configuration management for the Files API.

Contains the Pydantic settings and the cached accessor used by the app factory
and the CLI.
"""
