"""
Top-level package for the API 101 learning playground.

All functionality lives in submodules under ``app``; the application
itself is ``api_playground.app.main:app``.
"""

__all__ = []
