"""
Shop Service: API Tests
=======================
Run:  pytest test_main.py -v --cov=shop --cov-report=term-missing
"""
import io
import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from sqlalchemy.exc import OperationalError

from main import app, logger as app_logger, register_routers
from shop.core.dependencies import get_member_service, get_order_service
from shop.core.logging import JSONFormatter
from shop.models.domain import Member, OrderStatus
from shop.repositories.member_repository import MemberRepository
from shop.services.member_service import MemberService

client = TestClient(app)


# ── Helpers ──────────────────────────────────────────────────────────────
def _create(name: str) -> int:
    r = client.post("/api/v2/members", json={"name": name})
    assert r.status_code == 201
    return r.json()["id"]


def _names():
    return [m["name"] for m in client.get("/api/v2/members").json()["data"]]


@pytest.fixture
def mock_service():
    service = MagicMock(spec=MemberService)
    app.dependency_overrides[get_member_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_member_service, None)


# ═══════════════════════════════════════════════════════════════════════════
# HEALTH & METRICS
# ═══════════════════════════════════════════════════════════════════════════
class TestHealth:
    def test_health_ok(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert r.json()["service"] == "shop-service"

    def test_readiness_ok(self):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["database"] == "connected"

    def test_readiness_fails_when_db_down(self):
        boom = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(MemberRepository, "verify_connection", side_effect=boom):
            r = client.get("/health/ready")
        assert r.status_code == 503

    def test_metrics_endpoint(self):
        _create("Alice")
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "shop_members_joined_total" in r.text

    def test_request_id_propagated(self):
        r = client.get("/api/v2/members", headers={"X-Request-ID": "my-req-42"})
        assert r.headers["X-Request-ID"] == "my-req-42"

    def test_request_id_generated(self):
        r = client.get("/api/v2/members")
        assert r.headers["X-Request-ID"]


# ═══════════════════════════════════════════════════════════════════════════
# POST /api/v2/members
# ═══════════════════════════════════════════════════════════════════════════
class TestCreateMember:
    def test_first_member_gets_id_1(self):
        r = client.post("/api/v2/members", json={"name": "Alice"})
        assert r.status_code == 201
        assert r.json() == {"id": 1}

    def test_created_member_is_listed(self):
        _create("Alice")
        _create("Bob")
        assert _names() == ["Alice", "Bob"]

    def test_missing_name_422(self):
        assert client.post("/api/v2/members", json={}).status_code == 422

    def test_empty_name_422_and_nothing_created(self):
        _create("Alice")
        r = client.post("/api/v2/members", json={"name": ""})
        assert r.status_code == 422
        assert _names() == ["Alice"]

    def test_null_name_422(self):
        assert client.post("/api/v2/members", json={"name": None}).status_code == 422

    @pytest.mark.parametrize("name", [" ", "   ", "\t\n"])
    def test_blank_name_422_and_nothing_created(self, name):
        r = client.post("/api/v2/members", json={"name": name})
        assert r.status_code == 422
        assert _names() == []

    def test_name_stored_as_sent(self):
        _create("  Alice ")
        assert _names() == ["  Alice "]

    def test_invalid_body_never_reaches_service(self, mock_service):
        r = client.post("/api/v2/members", json={"name": ""})
        assert r.status_code == 422
        mock_service.join.assert_not_called()

    def test_join_receives_new_entity(self, mock_service):
        mock_service.join.return_value = 42
        r = client.post("/api/v2/members", json={"name": "Carol"})
        assert r.json() == {"id": 42}
        member = mock_service.join.call_args.args[0]
        assert isinstance(member, Member)
        assert member.name == "Carol"

    def test_join_counter_incremented(self):
        before = REGISTRY.get_sample_value("shop_members_joined_total") or 0
        _create("Alice")
        assert REGISTRY.get_sample_value("shop_members_joined_total") == before + 1


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/v2/members
# ═══════════════════════════════════════════════════════════════════════════
class TestListMembers:
    def test_empty(self):
        r = client.get("/api/v2/members")
        assert r.status_code == 200
        assert r.json() == {"data": []}

    def test_envelope_has_only_data(self):
        for name in ("Alice", "Bob", "Carol"):
            _create(name)
        body = client.get("/api/v2/members").json()
        assert list(body.keys()) == ["data"]
        assert body["data"] == [{"name": "Alice"}, {"name": "Bob"}, {"name": "Carol"}]

    def test_dto_hides_entity_fields(self):
        client.post("/api/v1/members", json={"name": "Alice", "address": {"city": "Seoul"}})
        item = client.get("/api/v2/members").json()["data"][0]
        assert item == {"name": "Alice"}

    def test_database_error_500(self, mock_service):
        mock_service.find_members.side_effect = OperationalError("SELECT", {}, Exception("down"))
        r = client.get("/api/v2/members")
        assert r.status_code == 500
        assert r.json()["error"] == "database_error"


# ═══════════════════════════════════════════════════════════════════════════
# PUT /api/v2/members/{id}
# ═══════════════════════════════════════════════════════════════════════════
class TestUpdateMember:
    def test_scenario(self):
        assert client.post("/api/v2/members", json={"name": "Alice"}).json() == {"id": 1}
        assert client.get("/api/v2/members").json() == {"data": [{"name": "Alice"}]}
        r = client.put("/api/v2/members/1", json={"name": "Alicia"})
        assert r.status_code == 200
        assert r.json() == {"id": 1, "name": "Alicia"}
        assert _names() == ["Alicia"]

    def test_not_found_404(self):
        r = client.put("/api/v2/members/999", json={"name": "Ghost"})
        assert r.status_code == 404
        body = r.json()
        assert body["error"] == "not_found"
        assert "999" in body["detail"]
        assert "name" not in body

    def test_non_numeric_id_422(self):
        assert client.put("/api/v2/members/abc", json={"name": "X"}).status_code == 422

    def test_empty_name_422_and_unchanged(self):
        mid = _create("Alice")
        r = client.put(f"/api/v2/members/{mid}", json={"name": ""})
        assert r.status_code == 422
        assert _names() == ["Alice"]

    def test_blank_name_422_and_unchanged(self):
        mid = _create("Alice")
        r = client.put(f"/api/v2/members/{mid}", json={"name": "   "})
        assert r.status_code == 422
        assert _names() == ["Alice"]

    def test_idempotent(self):
        mid = _create("Alice")
        first = client.put(f"/api/v2/members/{mid}", json={"name": "Alicia"})
        second = client.put(f"/api/v2/members/{mid}", json={"name": "Alicia"})
        assert first.json() == second.json() == {"id": mid, "name": "Alicia"}
        assert _names() == ["Alicia"]

    def test_only_target_member_changes(self):
        _create("Alice")
        bob = _create("Bob")
        client.put(f"/api/v2/members/{bob}", json={"name": "Robert"})
        assert _names() == ["Alice", "Robert"]

    def test_response_comes_from_fresh_read(self, mock_service):
        mock_service.find_one.return_value = Member(id=7, name="Stored")
        r = client.put("/api/v2/members/7", json={"name": "Submitted"})
        assert r.json() == {"id": 7, "name": "Stored"}
        mock_service.update.assert_called_once_with(7, "Submitted")
        mock_service.find_one.assert_called_once_with(7)


# ═══════════════════════════════════════════════════════════════════════════
# /api/v1/members: legacy entity contract
# ═══════════════════════════════════════════════════════════════════════════
class TestLegacyMembers:
    def test_create_and_list_exposes_entity_shape(self):
        r = client.post("/api/v1/members", json={
            "name": "Alice", "address": {"city": "Seoul", "street": "Main", "zipcode": "12345"},
        })
        assert r.status_code == 201
        mid = r.json()["id"]
        members = client.get("/api/v1/members").json()
        assert members == [{
            "id": mid, "name": "Alice",
            "address": {"city": "Seoul", "street": "Main", "zipcode": "12345"},
        }]

    def test_bare_array_response(self):
        _create("Alice")
        assert isinstance(client.get("/api/v1/members").json(), list)

    def test_empty_name_422_and_nothing_created(self):
        r = client.post("/api/v1/members", json={"name": ""})
        assert r.status_code == 422
        assert client.get("/api/v1/members").json() == []

    def test_missing_name_never_reaches_service(self, mock_service):
        r = client.post("/api/v1/members", json={"address": {"city": "Seoul"}})
        assert r.status_code == 422
        mock_service.join.assert_not_called()

    def test_blank_name_422(self):
        assert client.post("/api/v1/members", json={"name": "  "}).status_code == 422
        assert client.get("/api/v1/members").json() == []

    def test_member_without_address_has_null_address(self):
        mid = _create("Alice")
        assert client.get("/api/v1/members").json() == [
            {"id": mid, "name": "Alice", "address": None},
        ]

    def test_empty_address_object_stored_as_none(self):
        r = client.post("/api/v1/members", json={"name": "Alice", "address": {}})
        assert r.status_code == 201
        assert client.get("/api/v1/members").json()[0]["address"] is None

    def test_partial_address_kept(self):
        client.post("/api/v1/members", json={"name": "Alice", "address": {"city": "Seoul"}})
        address = client.get("/api/v1/members").json()[0]["address"]
        assert address == {"city": "Seoul", "street": None, "zipcode": None}

    def test_disabled_legacy_api_returns_404(self):
        legacy_off = FastAPI()
        register_routers(legacy_off, legacy_api=False)
        off_client = TestClient(legacy_off)
        assert off_client.get("/api/v1/members").status_code == 404
        assert off_client.post("/api/v1/members", json={"name": "Alice"}).status_code == 404
        r = off_client.post("/api/v2/members", json={"name": "Alice"})
        assert r.status_code == 201
        assert off_client.get("/api/v2/members").json() == {"data": [{"name": "Alice"}]}
        assert "/api/v1/members" not in off_client.get("/openapi.json").json()["paths"]

    def test_marked_deprecated(self):
        paths = client.get("/openapi.json").json()["paths"]
        assert paths["/api/v1/members"]["get"]["deprecated"] is True
        assert "deprecated" not in paths["/api/v2/members"]["get"]


# ═══════════════════════════════════════════════════════════════════════════
# ERROR HANDLING
# ═══════════════════════════════════════════════════════════════════════════
@pytest.fixture
def log_lines():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    app_logger.addHandler(handler)
    yield lambda: [json.loads(line) for line in stream.getvalue().splitlines()]
    app_logger.removeHandler(handler)


class TestErrorHandling:
    def test_database_error_logged_with_request_id(self, mock_service, log_lines):
        mock_service.find_members.side_effect = OperationalError("SELECT", {}, Exception("down"))
        r = client.get("/api/v2/members", headers={"X-Request-ID": "rid-77"})
        assert r.status_code == 500
        assert r.json()["request_id"] == "rid-77"
        errors = [line for line in log_lines() if line["message"] == "Database error"]
        assert len(errors) == 1
        assert errors[0]["request_id"] == "rid-77"
        assert errors[0]["level"] == "ERROR"
        assert errors[0]["error_type"] == "OperationalError"

    def test_unhandled_error_500(self, mock_service, log_lines):
        mock_service.find_members.side_effect = RuntimeError("kaboom")
        lenient = TestClient(app, raise_server_exceptions=False)
        r = lenient.get("/api/v2/members", headers={"X-Request-ID": "rid-500"})
        assert r.status_code == 500
        body = r.json()
        assert body["error"] == "internal_server_error"
        assert body["detail"] == "kaboom"
        assert set(body) == {"error", "detail", "request_id"}
        errors = [line for line in log_lines() if line["message"] == "Unhandled exception"]
        assert errors[0]["error_type"] == "RuntimeError"

    def test_not_found_body_carries_request_id(self):
        r = client.put("/api/v2/members/999", json={"name": "Ghost"},
                       headers={"X-Request-ID": "rid-404"})
        assert r.status_code == 404
        assert r.json()["request_id"] == "rid-404"
        assert r.headers["X-Request-ID"] == "rid-404"


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/v2/orders
# ═══════════════════════════════════════════════════════════════════════════
class TestListOrders:
    @pytest.fixture
    def orders(self):
        service = get_order_service()
        alice, bob = _create("Alice"), _create("Bob")
        placed = [service.order(alice), service.order(bob), service.order(alice)]
        service.cancel_order(placed[2])
        return placed

    def test_no_criteria_returns_all(self, orders):
        data = client.get("/api/v2/orders").json()["data"]
        assert [o["order_id"] for o in data] == orders

    def test_filter_by_member_name(self, orders):
        data = client.get("/api/v2/orders", params={"member_name": "Alice"}).json()["data"]
        assert [o["order_id"] for o in data] == [orders[0], orders[2]]
        assert {o["member_name"] for o in data} == {"Alice"}

    def test_filter_by_status(self, orders):
        data = client.get("/api/v2/orders", params={"order_status": "CANCEL"}).json()["data"]
        assert [o["order_id"] for o in data] == [orders[2]]
        assert data[0]["order_status"] == OrderStatus.CANCEL.value

    def test_both_filters(self, orders):
        params = {"member_name": "Alice", "order_status": "ORDER"}
        data = client.get("/api/v2/orders", params=params).json()["data"]
        assert [o["order_id"] for o in data] == [orders[0]]

    def test_partial_name_does_not_match(self, orders):
        data = client.get("/api/v2/orders", params={"member_name": "Ali"}).json()["data"]
        assert data == []

    def test_invalid_status_422(self):
        assert client.get("/api/v2/orders", params={"order_status": "SHIPPED"}).status_code == 422
