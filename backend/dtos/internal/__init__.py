"""
Internal DTOs

Plain records exchanged between the repository and service layers.
These are not exposed to external APIs.
"""
