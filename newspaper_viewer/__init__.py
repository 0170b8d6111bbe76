"""
Newspaper Viewer - Daily newspaper edition resolver and PDF viewer backend.

This package provides a modular system for:
- Resolving the most recent published edition of a daily newspaper
- Proxying the edition PDF to avoid cross-origin restrictions
- Paginating and rendering PDF pages for the viewer frontend
"""

__version__ = "0.1.0"
