"""
API module for HTTP endpoints.
"""
from .http import router

__all__ = ['router']
