"""Infrastructure layer for Quote Forge.

Contains the HTTP API, authentication and persistence adapters.
"""
