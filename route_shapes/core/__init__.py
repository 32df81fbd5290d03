"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Wire-format numbers and WGS 84 bounds
- exceptions: Custom exception hierarchy
"""
