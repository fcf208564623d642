"""Unit tests for the API contract compliance check."""

import pytest
from fastapi import APIRouter, FastAPI

from calculator_service.main import app
from verify_compliance import (
    DEFAULT_OPENAPI_FILE,
    compare_endpoints,
    extract_implemented_endpoints,
    extract_spec_endpoints,
    main,
)


@pytest.mark.unit
class TestCompliance:
    """Test verify_compliance"""

    def test_locked_contract_lists_both_endpoints(self):
        endpoints = extract_spec_endpoints(DEFAULT_OPENAPI_FILE)

        assert set(endpoints) == {"GET /health", "POST /calculate"}

    def test_app_routes_are_extracted(self):
        endpoints = extract_implemented_endpoints(app)

        assert "GET /health" in endpoints
        assert "POST /calculate" in endpoints
        assert not any(key.endswith("/docs") for key in endpoints)

    def test_endpoint_names_are_operation_ids(self):
        endpoints = extract_implemented_endpoints(app)
        operation = app.openapi()["paths"]["/calculate"]["post"]

        assert endpoints["POST /calculate"]["name"] == operation["operationId"]

    def test_nested_routers_are_extracted(self):
        """Routes reached through included routers count as implemented"""
        inner = APIRouter(prefix="/v1")

        @inner.get("/items")
        async def list_items():
            return []

        @inner.post("/hidden", include_in_schema=False)
        async def hidden():
            return {}

        outer = APIRouter(prefix="/api")
        outer.include_router(inner)
        nested_app = FastAPI()
        nested_app.include_router(outer)

        assert set(extract_implemented_endpoints(nested_app)) == {"GET /api/v1/items"}

    def test_app_matches_locked_contract(self, capsys):
        assert main(app=app) == 0
        assert "COMPLIANCE CHECK PASSED" in capsys.readouterr().out

    def test_missing_endpoint_fails(self, tmp_path, capsys):
        contract = tmp_path / "openapi.yaml"
        contract.write_text(
            "paths:\n"
            "  /health:\n"
            "    get:\n"
            "      summary: Health Check\n"
            "  /divide:\n"
            "    post:\n"
            "      summary: Divide\n"
            "      tags: [calculator]\n"
        )

        assert main(openapi_file=contract, app=app) == 1
        out = capsys.readouterr().out
        assert "POST /divide" in out
        assert "POST /calculate" in out

    def test_compare_endpoints(self):
        result = compare_endpoints(
            {"GET /a": {}, "GET /b": {}},
            {"GET /b": {}, "GET /c": {}},
        )

        assert result == {
            "implemented": ["GET /b"],
            "missing": ["GET /a"],
            "extra": ["GET /c"],
        }
