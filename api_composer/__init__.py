"""
API Composer - interactive HTTP request composer backend.

Builds outbound requests from raw form fields, sends them to a fixed API
origin and normalizes the result into display text.
"""

__version__ = "1.0.0"
