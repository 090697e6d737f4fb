"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.api.dependencies import get_decision_engine
from decision_gateway.domain.decision_engine import DecisionEngine


TODAY = date(2024, 6, 15)


class AcceptAllValidator:
    """Validator stub for codes whose checksum is irrelevant to the test"""

    def is_valid(self, personal_code: str) -> bool:
        return True


class RejectAllValidator:
    def is_valid(self, personal_code: str) -> bool:
        return False


@pytest.fixture
def today() -> date:
    """Fixed evaluation date so ages are deterministic"""
    return TODAY


@pytest.fixture
def validator() -> AcceptAllValidator:
    return AcceptAllValidator()


@pytest.fixture
def reject_validator() -> RejectAllValidator:
    return RejectAllValidator()


@pytest.fixture
def engine(validator: AcceptAllValidator) -> DecisionEngine:
    """Decision engine with a permissive validator and a fixed clock"""
    return DecisionEngine(validator=validator, clock=lambda: TODAY)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the test decision engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
