"""
External service integrations
"""

from .arxiv import ArxivClient
