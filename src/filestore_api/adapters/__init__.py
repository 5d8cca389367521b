"""
Adapter layer for the Files API.

Contains the storage abstraction and its local filesystem implementation.
"""
