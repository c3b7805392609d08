"""
API Integration Tests
End-to-end testing of API endpoints with real HTTP requests
"""
import json

import pytest
from fastapi.testclient import TestClient

API = "/api/v1"


def voucher_body(type_id, lines, source=None, destination=None, voucher_date="2024-01-15", **extra):
    body = {
        "voucher_date": voucher_date,
        "source_site_id": source,
        "destination_site_id": destination,
        "voucher_type_id": type_id,
        "created_by": 1,
        "items": [{"item_id": item_id, "quantity": qty} for item_id, qty in lines],
    }
    body.update(extra)
    return body


class TestSystemAPI:

    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] in ["healthy", "degraded"]
        assert "version" in data

    def test_system_info(self, client: TestClient):
        response = client.get("/info")

        assert response.status_code == 200
        data = response.json()
        assert "application" in data
        assert "features" in data

    def test_voucher_errors_documented(self, client: TestClient):
        schema = client.get("/openapi.json").json()

        responses = schema["paths"]["/api/v1/inventory/vouchers/{voucher_id}"]["delete"]["responses"]
        assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")


class TestVoucherAPI:

    def test_post_and_get_voucher(self, client: TestClient, sites, items, type_ids):
        response = client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Purchase Inward"], [(items["cement"], 12)], destination=sites["s1"]),
        )

        assert response.status_code == 201
        voucher_id = response.json()["id"]

        response = client.get(f"{API}/inventory/vouchers/{voucher_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["transaction_number"] == "1"
        assert data["remarks"] == "Purchase Inward"
        assert data["items"][0]["quantity"] == 12

    def test_zero_quantity_returns_400(self, client: TestClient, sites, items, type_ids):
        response = client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Purchase Inward"], [(items["cement"], 0)], destination=sites["s1"]),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.parametrize("quantity", [float("inf"), float("nan")])
    def test_non_finite_quantity_returns_400(self, client: TestClient, sites, items, type_ids, quantity):
        body = voucher_body(type_ids["Purchase Inward"], [(items["cement"], quantity)], destination=sites["s1"])

        # Infinity and NaN literals, as a lenient JSON encoder writes them
        response = client.post(
            f"{API}/inventory/vouchers",
            content=json.dumps(body),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert client.get(f"{API}/inventory/vouchers").json()["total"] == 0

    def test_unknown_item_returns_409(self, client: TestClient, sites, type_ids):
        response = client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Purchase Inward"], [(9999, 1)], destination=sites["s1"]),
        )

        assert response.status_code == 409

    def test_update_and_delete(self, client: TestClient, sites, items, type_ids):
        body = voucher_body(type_ids["Purchase Inward"], [(items["cement"], 5)], destination=sites["s1"])
        voucher_id = client.post(f"{API}/inventory/vouchers", json=body).json()["id"]

        body["items"] = [{"item_id": items["cement"], "quantity": 8}]
        response = client.put(f"{API}/inventory/vouchers/{voucher_id}", json=body)
        assert response.status_code == 200

        updated = client.get(f"{API}/inventory/vouchers/{voucher_id}").json()
        assert updated["updated_by"] == 1
        assert updated["updated_at"] is not None

        balance = client.get(f"{API}/inventory/balances/{sites['s1']}/{items['cement']}").json()
        assert balance["balance"] == 8

        response = client.delete(f"{API}/inventory/vouchers/{voucher_id}")
        assert response.status_code == 200

        assert client.get(f"{API}/inventory/vouchers/{voucher_id}").status_code == 404
        balance = client.get(f"{API}/inventory/balances/{sites['s1']}/{items['cement']}").json()
        assert balance["balance"] == 0

    def test_update_with_mismatched_id(self, client: TestClient, sites, items, type_ids):
        body = voucher_body(type_ids["Purchase Inward"], [(items["cement"], 5)], destination=sites["s1"])
        voucher_id = client.post(f"{API}/inventory/vouchers", json=body).json()["id"]

        body["id"] = voucher_id + 1
        response = client.put(f"{API}/inventory/vouchers/{voucher_id}", json=body)

        assert response.status_code == 400

    def test_delete_missing_voucher_returns_404(self, client: TestClient):
        assert client.delete(f"{API}/inventory/vouchers/999").status_code == 404

    def test_list_vouchers_paginated(self, client: TestClient, sites, items, type_ids):
        for _ in range(3):
            client.post(
                f"{API}/inventory/vouchers",
                json=voucher_body(type_ids["Opening Stock"], [(items["rebar"], 1)], destination=sites["s2"]),
            )

        response = client.get(f"{API}/inventory/vouchers", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["total_pages"] == 2
        assert data["has_next"] is True
        assert [row["transaction_number"] for row in data["items"]] == ["3", "2"]
        assert data["items"][0]["destination_site_name"] == "Beta Site"

    def test_next_transaction_number(self, client: TestClient):
        response = client.get(f"{API}/inventory/vouchers/next-number")

        assert response.json() == {"transaction_number": "1"}


class TestBalanceAndLedgerAPI:

    def test_transfer_scenario(self, client: TestClient, sites, items, type_ids):
        purchase = client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Purchase Inward"], [(items["cement"], 10)], destination=sites["s1"]),
        ).json()["id"]
        client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Site → Site"], [(items["cement"], 4)],
                              source=sites["s1"], destination=sites["s2"]),
        )

        rows = client.get(f"{API}/inventory/balances/items/{items['cement']}").json()
        by_site = {row["site_id"]: row["balance"] for row in rows}
        assert by_site == {sites["godown"]: 0, sites["s1"]: 6, sites["s2"]: 4}

        client.delete(f"{API}/inventory/vouchers/{purchase}")

        rows = client.get(f"{API}/inventory/balances/items/{items['cement']}").json()
        by_site = {row["site_id"]: row["balance"] for row in rows}
        assert by_site[sites["s1"]] == -4
        assert by_site[sites["s2"]] == 4

    def test_list_balances_and_site_view(self, client: TestClient, sites, items, type_ids):
        client.post(
            f"{API}/inventory/vouchers",
            json=voucher_body(type_ids["Opening Stock"], [(items["cement"], 3), (items["rebar"], 7)],
                              destination=sites["godown"]),
        )

        data = client.get(f"{API}/inventory/balances", params={"item_name": "cement"}).json()
        assert data["total"] == 1
        assert data["items"][0]["balance"] == 3

        rows = client.get(f"{API}/inventory/balances/sites/{sites['godown']}").json()
        assert [row["item_code"] for row in rows] == ["CEM-53", "TMT-12"]

    def test_movement_history(self, client: TestClient, sites, items, type_ids):
        for qty, day in ((10, "2024-02-01"), (5, "2024-02-02")):
            client.post(
                f"{API}/inventory/vouchers",
                json=voucher_body(type_ids["Purchase Inward"], [(items["cement"], qty)],
                                  destination=sites["s1"], voucher_date=day),
            )

        response = client.get(
            f"{API}/inventory/movements", params={"item_id": items["cement"], "page": 2, "limit": 1}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["items"][0]["running_balance"] == 15

    def test_movement_history_inverted_dates(self, client: TestClient):
        response = client.get(
            f"{API}/inventory/movements", params={"from_date": "2024-02-10", "to_date": "2024-02-01"}
        )

        assert response.status_code == 400

    def test_limit_above_maximum_rejected(self, client: TestClient):
        response = client.get(f"{API}/inventory/balances", params={"limit": 100000})

        assert response.status_code == 422


class TestMasterDataAPI:

    def test_site_crud(self, client: TestClient):
        response = client.post(f"{API}/sites", json={"code": "WH1", "name": "Main Yard", "type": "Warehouse"})
        assert response.status_code == 201
        site_id = response.json()["id"]

        response = client.put(
            f"{API}/sites/{site_id}",
            json={"code": "WH1", "name": "Main Yard East", "type": "Warehouse"},
        )
        assert response.json()["name"] == "Main Yard East"

        assert client.delete(f"{API}/sites/{site_id}").status_code == 200
        assert client.get(f"{API}/sites/{site_id}").status_code == 404

    def test_duplicate_item_code_returns_409(self, client: TestClient, items):
        response = client.post(f"{API}/items", json={"code": "CEM-53", "name": "Duplicate"})

        assert response.status_code == 409

    def test_items_with_brand(self, client: TestClient):
        brand_id = client.post(f"{API}/brands", json={"name": "ACC"}).json()["id"]
        model_id = client.post(f"{API}/models", json={"name": "Gold"}).json()["id"]
        client.post(f"{API}/items", json={
            "code": "ACC-G", "name": "ACC Gold", "brand_id": brand_id, "model_id": model_id
        })

        rows = client.get(f"{API}/items").json()

        assert rows[0]["brand_name"] == "ACC"
        assert rows[0]["model_name"] == "Gold"

    def test_transaction_types(self, client: TestClient):
        rows = client.get(f"{API}/inventory/transaction-types").json()

        assert len(rows) == 8

    def test_dashboard_stats(self, client: TestClient, sites, items):
        data = client.get(f"{API}/dashboard/stats").json()

        assert data["active_items_count"] == 2
        assert data["active_sites_count"] == 3
