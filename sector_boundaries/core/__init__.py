"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (default anchor, zoom, padding, style)
- exceptions: Custom exception hierarchy
"""
