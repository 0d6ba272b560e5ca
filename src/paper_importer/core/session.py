"""
Session management for HTTP requests
"""

import requests
from typing import Optional, Dict

from ..config import DEFAULT_USER_AGENT


class SessionManager:
    """Creates HTTP sessions with configurable headers"""

    DEFAULT_HEADERS = {
        'User-Agent': DEFAULT_USER_AGENT,
        'Accept': 'application/atom+xml,application/pdf;q=0.9,*/*;q=0.8',
        'Connection': 'keep-alive',
    }

    def __init__(
        self,
        user_agent: Optional[str] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize session manager

        Args:
            user_agent: Custom User-Agent string
            extra_headers: Additional headers to include
        """
        self.user_agent = user_agent
        self.extra_headers = extra_headers or {}

    def create_session(self) -> requests.Session:
        """
        Create a new session with configured headers

        Returns:
            Configured requests.Session
        """
        session = requests.Session()

        headers = self.DEFAULT_HEADERS.copy()
        if self.user_agent:
            headers['User-Agent'] = self.user_agent
        headers.update(self.extra_headers)
        session.headers.update(headers)

        return session
