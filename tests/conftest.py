"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from boleto_gateway.api.main import create_app
from boleto_gateway.domain.models import DocumentReference, Payee, Payment


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


# Reference vector: Caixa SIGCB, unregistered billing, payee-issued
@pytest.fixture
def payment() -> Payment:
    """R$ 1.234,00 due on 2024-05-10 (factor 9712)"""
    return Payment(due_date=date(2024, 5, 10), amount_cents=123400)


@pytest.fixture
def payee() -> Payee:
    return Payee(assignor_code="123456")


@pytest.fixture
def document() -> DocumentReference:
    return DocumentReference(our_number="123456789012345")


@pytest.fixture
def expected_barcode() -> str:
    return "10495971200001234001234560123245647890123453"


@pytest.fixture
def expected_typeable_line() -> str:
    return "10491234566012324564378901234530597120000123400"


@pytest.fixture
def boleto_request() -> dict:
    """JSON body matching the payment/payee/document fixtures"""
    return {
        "due_date": "2024-05-10",
        "amount_cents": 123400,
        "assignor_code": "123456",
        "our_number": "123456789012345",
    }
