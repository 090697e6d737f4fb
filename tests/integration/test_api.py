"""Integration tests for API endpoints"""

from datetime import date
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.api.dependencies import get_decision_engine
from decision_gateway.domain.decision_engine import DecisionEngine
from decision_gateway.infrastructure.validators.personal_code import EstonianPersonalCodeValidator


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["version"] == "0.1.0"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001019999", "loan_amount": 4000, "loan_period": 12},
    )
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_decision_total" in response.text
    assert 'endpoint="/v1/loan/decision"' in response.text


def test_request_id_propagated(client: TestClient):
    """Test caller-supplied request ID is echoed back"""
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_decision_endpoint_approval(client: TestClient):
    """Test POST /v1/loan/decision with approval at maximum amount"""
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001019999", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 200
    assert response.json() == {"loan_amount": 10000, "loan_period": 12, "error_message": None}
    assert "X-Request-ID" in response.headers


def test_decision_endpoint_period_extended(client: TestClient):
    """Test approval with a longer period than requested"""
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001014500", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 200
    assert response.json()["loan_amount"] == 2000
    assert response.json()["loan_period"] == 20


def test_decision_endpoint_invalid_amount(client: TestClient):
    """Test out-of-range amount is reported with its reason"""
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001019999", "loan_amount": 1999, "loan_period": 12},
    )

    assert response.status_code == 400
    assert response.json() == {"loan_amount": None, "loan_period": None, "error_message": "Invalid loan amount!"}


def test_decision_endpoint_invalid_period(client: TestClient):
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001019999", "loan_amount": 4000, "loan_period": 61},
    )

    assert response.status_code == 400
    assert response.json()["error_message"] == "Invalid loan period!"


def test_decision_endpoint_invalid_age(client: TestClient):
    """Test a 17-year-old customer is rejected"""
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "50706159999", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 400
    assert response.json()["error_message"] == "Invalid age!"


def test_decision_endpoint_unknown_century(client: TestClient):
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "99001019999", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 400
    assert response.json()["error_message"] == "Invalid personal ID code!"


def test_decision_endpoint_no_valid_loan(client: TestClient):
    """Test debt segment customer gets 404"""
    response = client.post(
        "/v1/loan/decision",
        json={"personal_code": "39001011000", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 404
    assert response.json()["error_message"] == "No valid loan found!"


def test_decision_endpoint_missing_field(client: TestClient):
    """Test request schema validation"""
    response = client.post("/v1/loan/decision", json={"personal_code": "39001019999"})
    assert response.status_code == 422


def test_decision_endpoint_unexpected_error():
    """Test unexpected engine failures map to 500"""

    class BrokenValidator:
        def is_valid(self, personal_code: str) -> bool:
            raise RuntimeError("validator unavailable")

    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: DecisionEngine(validator=BrokenValidator())
    response = TestClient(app).post(
        "/v1/loan/decision",
        json={"personal_code": "39001019999", "loan_amount": 4000, "loan_period": 12},
    )

    assert response.status_code == 500
    assert response.json()["error_message"] == "An unexpected error occurred"


def test_decision_endpoint_with_checksum_validation():
    """Test real personal code validation end to end"""
    app = create_app()
    engine = DecisionEngine(validator=EstonianPersonalCodeValidator(), clock=lambda: date(2024, 6, 15))
    app.dependency_overrides[get_decision_engine] = lambda: engine
    test_client = TestClient(app)

    approved = test_client.post(
        "/v1/loan/decision",
        json={"personal_code": "49002019993", "loan_amount": 4000, "loan_period": 12},
    )
    assert approved.status_code == 200
    assert approved.json()["loan_amount"] == 10000

    bad_checksum = test_client.post(
        "/v1/loan/decision",
        json={"personal_code": "49002019990", "loan_amount": 4000, "loan_period": 12},
    )
    assert bad_checksum.status_code == 400
    assert bad_checksum.json()["error_message"] == "Invalid personal ID code!"

    debt = test_client.post(
        "/v1/loan/decision",
        json={"personal_code": "36805280109", "loan_amount": 4000, "loan_period": 12},
    )
    assert debt.status_code == 404
