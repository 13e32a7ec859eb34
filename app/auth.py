# app/auth.py
import hmac
from abc import ABC, abstractmethod

from starlette.requests import Request


class AuthPolicy(ABC):
    """Decides whether a request may reach the API routes."""

    @abstractmethod
    def authorize(self, request: Request) -> bool:
        ...


class StaticKeyPolicy(AuthPolicy):
    """A single shared secret passed as a query parameter (?apikey=...)."""

    def __init__(self, param_name: str, expected_key: str):
        self.param_name = param_name
        self.expected_key = expected_key

    def authorize(self, request: Request) -> bool:
        key = request.query_params.get(self.param_name)
        if not key:
            return False
        return hmac.compare_digest(key.encode(), self.expected_key.encode())
