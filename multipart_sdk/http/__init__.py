"""Multipart SDK HTTP module.

This module provides the `multipart/form-data` encoder and the functions that
attach an encoded body to outbound `requests` requests.

The module includes:
- The streaming body builder with random boundary generation
- Output sinks for in-memory and disk-spooled bodies
- MIME type and filename inference for local files
- Single and multiple file upload helpers
"""
