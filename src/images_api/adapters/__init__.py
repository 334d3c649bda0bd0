"""
Adapter layer for the Images API.

Contains the adapter around the external image hosting service (ImageKit).
"""
