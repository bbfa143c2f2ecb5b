# yelpcamp/utils/__init__.py
"""
Utility functions package.

This package contains reusable helpers organized by concern:
- general.py: Request helpers (method override, bracketed form fields, redirects)
- images.py: Image URL transformations (thumbnails)
"""

# Import commonly used utilities for convenient access
from .general import MethodOverrideMiddleware, form_group, is_safe_redirect
from .images import thumbnail_url, ThumbnailError

__all__ = [
    'MethodOverrideMiddleware',
    'form_group',
    'is_safe_redirect',
    'thumbnail_url',
    'ThumbnailError',
]
