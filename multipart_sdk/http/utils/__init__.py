"""Utility functions for the multipart encoder and request adapter.

This package contains helpers used by the encoder and the HTTP adapter for
operations like:
- Boundary token generation
- MIME type and filename inference
- Output buffer strategies
- URL redaction for log messages
"""
