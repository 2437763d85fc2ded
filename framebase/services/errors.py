"""
Service-layer error.
"""

from typing import Optional


class ServiceError(Exception):
    """
    A data operation failed.

    The message is safe to show to the client. Routers choose the status
    code unless the service pins one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
