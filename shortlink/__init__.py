"""
Shortlink - a minimal URL shortening service.

A shared secret guards submissions; every other GET/HEAD path is treated
as a slug and redirected to its stored target URL.
"""

__version__ = "1.0.0"
