"""
Shared utilities used by the datasources.

- http.py - requests session with capped retry and default timeout
"""
