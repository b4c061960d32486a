"""Top-level package for the FX intelligence monitor.

This package contains the application entrypoint and all supporting modules
for fetching financial news, scoring its currency impact, and rendering the
aggregated dashboard.
"""

__all__ = []
