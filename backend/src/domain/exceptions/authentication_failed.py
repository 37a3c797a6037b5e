"""
AuthenticationError - Missing, invalid or expired access token.
Maps to: HTTP 401 Unauthorized (live socket: handshake rejected)
"""


class AuthenticationError(Exception):
    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)
