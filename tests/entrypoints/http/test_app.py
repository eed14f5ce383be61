"""
Unit tests for FastAPI application setup and configuration.

- build_app() creates a properly configured FastAPI instance
- Router registration (health, installments with the /v1 prefix)
- OpenAPI schema generation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_loan.entrypoints.http.app import build_app


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Vehicle Loan API"
    assert app.version == "0.1.0"
    assert "Vehicle loan calculator API" in app.description


def test_routes_are_registered() -> None:
    paths = TestClient(build_app()).get("/openapi.json").json()["paths"]

    assert "/health" in paths
    assert "/v1/loans/installments" in paths


def test_openapi_schema_documents_installments_endpoint() -> None:
    client = TestClient(build_app())

    response = client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert "post" in schema["paths"]["/v1/loans/installments"]
    assert "InstallmentScheduleRequestDTO" in schema["components"]["schemas"]


def test_health_is_served_without_prefix() -> None:
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
