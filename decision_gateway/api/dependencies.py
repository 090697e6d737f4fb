"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from decision_gateway.domain.decision_engine import DecisionEngine
from decision_gateway.infrastructure.validators.personal_code import EstonianPersonalCodeValidator

_engine = DecisionEngine(validator=EstonianPersonalCodeValidator())


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide the shared decision engine (stateless between requests)"""
    return _engine
