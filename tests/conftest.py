"""
Pytest configuration and shared fixtures.

This file adds the project root to the Python path so that tests can import
from the domain, repositories, services, api and scripts modules.

HTTP is never performed: tests hand a fake session (or patch `requests`) and
inspect the calls it received.
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Add the project root to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

CLIENT_EMAIL = "price-reader@buyback-test.iam.gserviceaccount.com"


class FakeResponse:
    """Just enough of requests.Response for the repositories under test."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload, ensure_ascii=False)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key) -> str:
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture
def service_account_info(private_key_pem) -> dict:
    return {
        "type": "service_account",
        "project_id": "buyback-test",
        "client_email": CLIENT_EMAIL,
        "private_key": private_key_pem,
        "token_uri": "https://oauth2.googleapis.com/token",
    }


@pytest.fixture
def service_account_json(service_account_info) -> str:
    return json.dumps(service_account_info)


@pytest.fixture
def credential(service_account_info):
    from domain.credential import ServiceAccountCredential

    return ServiceAccountCredential.from_info(service_account_info)


@pytest.fixture
def sheet_rows() -> list:
    return [
        ["Модель", "Память", "Цена"],
        ["iphone 15", "128 гб", "30 000 ₽"],
        ["iPhone 15", "256GB", "34000"],
        ["iPhone  16   Pro Max", "256 ГБ", "78 500"],
        ["", "128GB", "30000"],
        ["iPhone 14", "128GB", "—"],
        ["iPhone 13"],
    ]
