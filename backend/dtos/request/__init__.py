"""
Request DTOs

Incoming user payloads, validated for presence and shape at the API boundary.
"""
