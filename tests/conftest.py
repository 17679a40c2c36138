"""Shared test fixtures."""

import pytest

from app import create_app
from config import TestingConfig
from models import StatusVeiculo


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def veiculos():
    return [
        {"id": 1, "placa": "ABC1234", "modelo": "Sprinter", "status": StatusVeiculo.DISPONIVEL},
        {"id": 2, "placa": "DEF5678", "modelo": "Volvo B340R", "status": StatusVeiculo.EM_USO},
        {"id": 3, "placa": "XYZ9A88", "modelo": "Sprinter Executiva", "status": StatusVeiculo.DISPONIVEL},
    ]
