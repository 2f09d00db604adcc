"""Tests for the HTTP tool endpoints."""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from zuglang_tools.constants import MAX_NUMERAL_DIGITS
from zuglang_tools.server.app import create_app
from zuglang_tools.tools import ToolResult
from tests.conftest import BASE_URL

ROUTER_URL = "/api/zulang_tool_rooter"


class TestDiscoveryRoute:
    def test_get_lists_tools(self, client: TestClient) -> None:
        response = client.get(ROUTER_URL)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        tools = response.json()["tools"]
        assert tools[0]["name"] == "zuglang_translator"
        assert tools[0]["url"] == f"{BASE_URL}/zuglang_translator"

    def test_post_is_rejected(self, client: TestClient) -> None:
        response = client.post(ROUTER_URL, json={"expression": "morgat flixu"})
        assert response.status_code == 405
        assert response.json() == {
            "error": (
                "This is a router endpoint. Use GET to discover tools, "
                "then call the tool-specific URLs returned."
            )
        }

    def test_base_url_derived_from_request(self) -> None:
        client = TestClient(create_app(), base_url="http://functions.local")
        tools = client.get(ROUTER_URL).json()["tools"]
        assert tools[1]["url"] == "http://functions.local/api/zuglang_calculator"

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        with patch("zuglang_tools.server.routes.discovery_payload", side_effect=RuntimeError("boom")):
            response = client.get(ROUTER_URL)
        assert response.status_code == 500
        assert response.json()["error"] == "Internal error occurred"


class TestTranslatorRoute:
    def test_known_phrase(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_translator", json={"expression": "Morgat Flixu"})
        assert response.status_code == 200
        assert response.json() == {"tool": "zuglang_translator", "result": "Good morning", "found": True}

    def test_unknown_phrase_is_200(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_translator", json={"expression": "blorp"})
        assert response.status_code == 200
        assert response.json()["found"] is False

    def test_missing_expression(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_translator", json={})
        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "INVALID_PARAMETERS"
        assert "expression" in body["error"]

    def test_empty_expression_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_translator", json={"expression": ""})
        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "INVALID_PARAMETERS"
        assert body["details"]["errors"][0]["field"] == "expression"

    def test_get_not_allowed(self, client: TestClient) -> None:
        assert client.get("/api/zuglang_translator").status_code == 405


class TestCalculatorRoute:
    def test_success(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "BC", "expression2": "CF", "operator": "+"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["tool"] == "zuglang_calculator"
        assert body["result"] == "BC + CF = DH (12 + 25 = 37 in decimal)"
        assert body["calculation"]["encoded_result"] == "DH"

    def test_invalid_operator(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "BC", "expression2": "CF", "operator": "%"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid operator. Must be one of: +, -, *, /"

    def test_division_by_zero(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "B", "expression2": "A", "operator": "/"},
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "DIVISION_BY_ZERO"

    def test_invalid_digit(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "BK", "expression2": "B", "operator": "+"},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "INVALID_DIGIT"
        assert body["details"] == {"char": "K", "position": 1}

    def test_empty_operand(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "", "expression2": "B", "operator": "+"},
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "EMPTY_INPUT"

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error_type"] == "INVALID_REQUEST"

    def test_non_object_body(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_calculator", json=["BC", "CF", "+"])
        assert response.status_code == 400
        assert response.json()["error"] == "Request body must be a JSON object"

    def test_overlong_operand(self, client: TestClient) -> None:
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": "B" * 5000, "expression2": "B", "operator": "+"},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "NUMERAL_TOO_LONG"
        assert body["details"] == {"length": 5000, "limit": MAX_NUMERAL_DIGITS}

    def test_longest_operands_succeed(self, client: TestClient) -> None:
        numeral = "J" * MAX_NUMERAL_DIGITS
        response = client.post(
            "/api/zuglang_calculator",
            json={"expression1": numeral, "expression2": numeral, "operator": "*"},
        )
        assert response.status_code == 200
        assert len(str(response.json()["calculation"]["decimal_result"])) == 2 * MAX_NUMERAL_DIGITS

    def test_unexpected_error_returns_500(self, client: TestClient, router) -> None:
        with patch.object(router, "execute", side_effect=RuntimeError("secret")):
            response = client.post(
                "/api/zuglang_calculator",
                json={"expression1": "B", "expression2": "B", "operator": "+"},
            )
        assert response.status_code == 500
        assert response.json()["error"] == "Internal error occurred"


class TestConversionRoutes:
    def test_to_decimal(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_to_decimal", json={"expression": "-DH"})
        assert response.json() == {"tool": "zuglang_to_decimal", "result": -37}

    def test_to_decimal_invalid(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_to_decimal", json={"expression": "DZ"})
        assert response.status_code == 422

    def test_to_zuglang(self, client: TestClient) -> None:
        response = client.post("/api/decimal_to_zuglang", json={"number": 1234})
        assert response.json() == {"tool": "decimal_to_zuglang", "result": "BCDE"}

    def test_to_zuglang_rejects_non_integer(self, client: TestClient) -> None:
        response = client.post("/api/decimal_to_zuglang", json={"number": 1.5})
        assert response.status_code == 400

    def test_to_decimal_overlong(self, client: TestClient) -> None:
        response = client.post("/api/zuglang_to_decimal", json={"expression": "B" * 5000})
        assert response.status_code == 422
        assert response.json()["error_type"] == "NUMERAL_TOO_LONG"

    def test_to_zuglang_rejects_boolean(self, client: TestClient) -> None:
        response = client.post("/api/decimal_to_zuglang", json={"number": True})
        assert response.status_code == 400
        assert response.json()["error_type"] == "INVALID_PARAMETERS"

    def test_to_zuglang_rejects_numeric_string(self, client: TestClient) -> None:
        response = client.post("/api/decimal_to_zuglang", json={"number": "12"})
        assert response.status_code == 400

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
    def test_to_zuglang_oversized_literal(self, client: TestClient) -> None:
        response = client.post(
            "/api/decimal_to_zuglang",
            content=b'{"number": ' + b"1" * 5000 + b"}",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error_type"] == "INVALID_REQUEST"


class TestResponseFailures:
    def test_unserialisable_payload_returns_500(self, client: TestClient, router) -> None:
        broken = ToolResult.success("zuglang_to_decimal", {"result": object()})
        with patch.object(router, "execute", return_value=broken):
            response = client.post("/api/zuglang_to_decimal", json={"expression": "B"})
        assert response.status_code == 500
        assert response.json()["error"] == "Internal error occurred"
