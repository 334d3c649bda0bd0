"""
Configuration management for the Images API.

Contains the Pydantic settings object holding ImageKit credentials and
server options, loaded from the environment and local env files.
"""
