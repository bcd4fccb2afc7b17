"""Shared validators package for the application.

This package contains reusable validation helpers that can be used
across different features and schemas.

Available validators:
- password.py: Password strength check
- text.py: Trimming and HTML escaping of submitted text
"""
