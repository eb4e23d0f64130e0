"""
API tests: authentication, tenant isolation and the salon endpoints
"""

import pytest
from fastapi.testclient import TestClient

from glambook.main import app
from glambook.services import tenant_store
from glambook.services.tenant_store import SQLTenantStore

API = "/api/v1"


@pytest.fixture
def today(fixed_clock):
    """Booking date on the same clock the API uses"""
    return fixed_clock().date().isoformat()


@pytest.fixture
def book(client, today):
    def post_booking(headers, **overrides):
        data = {
            "clientName": "Sarah Johnson",
            "service": "Hair Color & Cut",
            "stylist": "Emma Wilson",
            "date": today,
            "time": "10:00",
            "duration": "2h",
            "price": 180,
        }
        data.update(overrides)
        return client.post(f"{API}/appointments", json=data, headers=headers)

    return post_booking


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "timestamp" in response.json()


def test_signup_response(client):
    response = client.post(f"{API}/auth/signup", json={
        "email": "jane@example.com",
        "password": "password123",
        "name": "Jane Doe",
        "salonName": "Glow Studio",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["user"]["email"] == "jane@example.com"
    assert body["user"]["salonName"] == "Glow Studio"
    assert body["user"]["tenantId"].startswith("salon_")
    assert body["user"]["subscriptionTier"] == "basic"


def test_signin_response(client, make_account):
    make_account(email="jane@example.com", password="password123")

    response = client.post(f"{API}/auth/signin", json={"email": "jane@example.com", "password": "password123"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["name"] == "Salon Owner"
    assert body["user"]["enabledFeatures"] == ["appointments", "clients", "staff"]


def test_duplicate_signup(client, make_account):
    make_account(email="jane@example.com")

    response = client.post(f"{API}/auth/signup", json={
        "email": "jane@example.com",
        "password": "password123",
        "name": "Someone Else",
    })

    assert response.status_code == 400
    assert response.json() == {"error": "Email already registered"}


def test_signup_validation_error_shape(client):
    response = client.post(f"{API}/auth/signup", json={"email": "not-an-email", "password": "short"})

    assert response.status_code == 400
    assert set(response.json()) == {"error"}
    assert response.json()["error"].startswith("Invalid request")


def test_wrong_password(client, make_account):
    make_account(email="jane@example.com")

    response = client.post(f"{API}/auth/signin", json={"email": "jane@example.com", "password": "wrong-pass"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_protected_routes_require_token(client):
    for path in ("/dashboard", "/analytics", "/appointments", "/staff", "/clients", "/campaigns", "/settings"):
        response = client.get(f"{API}{path}")
        assert response.status_code == 401, path
        assert "error" in response.json()


def test_invalid_token_is_rejected(client):
    response = client.get(f"{API}/dashboard", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized access"}


def test_me(client, auth_headers):
    response = client.get(f"{API}/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "owner@example.com"


def test_signout_invalidates_token(client, auth_headers):
    assert client.post(f"{API}/auth/signout", headers=auth_headers).json() == {"success": True}

    response = client.get(f"{API}/appointments", headers=auth_headers)
    assert response.status_code == 401

    # Signing out again is harmless
    assert client.post(f"{API}/auth/signout", headers=auth_headers).status_code == 200
    assert client.post(f"{API}/auth/signout").status_code == 200


def test_booking_flow_updates_dashboard(client, auth_headers, book):
    """Sign up, sign in, book and see the booking on the dashboard"""
    dashboard = client.get(f"{API}/dashboard", headers=auth_headers).json()
    assert dashboard["todayAppointmentCount"] == 0
    assert dashboard["todayRevenue"] == 0
    assert dashboard["settings"]["salonName"] == "My Salon"

    response = book(auth_headers)
    assert response.status_code == 201
    appointment = response.json()["appointment"]
    assert appointment["status"] == "confirmed"
    assert appointment["stylistName"] == "Emma Wilson"
    assert appointment["durationMinutes"] == 120
    assert appointment["price"] == 180

    dashboard = client.get(f"{API}/dashboard", headers=auth_headers).json()
    assert dashboard["todayAppointmentCount"] == 1
    assert dashboard["todayRevenue"] == 180
    assert [item["id"] for item in dashboard["recentAppointments"]] == [appointment["id"]]


def test_update_appointment(client, auth_headers, book):
    appointment = book(auth_headers).json()["appointment"]

    response = client.put(f"{API}/appointments/{appointment['id']}", json={"status": "completed"},
                          headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["appointment"]["status"] == "completed"

    listed = client.get(f"{API}/appointments", headers=auth_headers).json()["appointments"]
    assert listed[0]["status"] == "completed"


def test_update_unknown_appointment(client, auth_headers):
    response = client.put(f"{API}/appointments/apt_missing", json={"status": "completed"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Appointment not found"}


def test_booking_validation(client, auth_headers, book):
    response = book(auth_headers, time="25:00")
    assert response.status_code == 400

    response = book(auth_headers, unknownField="x")
    assert response.status_code == 400

    response = book(auth_headers, price=-5)
    assert response.status_code == 400

    assert client.get(f"{API}/appointments", headers=auth_headers).json()["appointments"] == []


def test_staff_endpoints(client, auth_headers):
    response = client.post(f"{API}/staff", json={"name": "Carlos Rodriguez", "specialization": "Barber"},
                           headers=auth_headers)
    assert response.status_code == 201
    member = response.json()["staffMember"]
    assert member["availability"] == "available"
    assert member["avatarRef"] == "CR"

    response = client.put(f"{API}/staff/{member['id']}", json={"availability": "busy"}, headers=auth_headers)
    assert response.json()["staffMember"]["availability"] == "busy"

    assert client.get(f"{API}/dashboard", headers=auth_headers).json()["staffUtilizationPercent"] == 100
    assert len(client.get(f"{API}/staff", headers=auth_headers).json()["staff"]) == 1


def test_client_endpoints(client, auth_headers, today):
    response = client.post(f"{API}/clients", json={"name": "Lisa Anderson", "lastVisit": today},
                           headers=auth_headers)
    assert response.status_code == 201
    created = response.json()["client"]
    assert created["loyaltyTier"] == "Bronze"
    assert created["visits"] == 0
    assert created["totalSpent"] == 0

    response = client.put(f"{API}/clients/{created['id']}", json={"loyaltyTier": "Gold", "visits": 4},
                          headers=auth_headers)
    assert response.json()["client"]["loyaltyTier"] == "Gold"

    analytics = client.get(f"{API}/analytics", headers=auth_headers).json()
    assert analytics["totalClients"] == 1
    assert analytics["retentionRate"] == 100


def test_campaign_endpoints(client, auth_headers):
    response = client.post(f"{API}/campaigns", json={"channel": "email", "segment": "VIP", "message": "Spring offer"},
                           headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["campaign"]["status"] == "draft"

    response = client.post(f"{API}/campaigns", json={"channel": "fax", "segment": "VIP", "message": "Hi"},
                           headers=auth_headers)
    assert response.status_code == 400

    assert len(client.get(f"{API}/campaigns", headers=auth_headers).json()["campaigns"]) == 1


def test_settings_rename(client, auth_headers):
    response = client.put(f"{API}/settings", json={"salonName": "Glow Studio", "timezone": "Europe/Madrid"},
                          headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["settings"]["salonName"] == "Glow Studio"
    assert client.get(f"{API}/settings", headers=auth_headers).json()["settings"]["timezone"] == "Europe/Madrid"
    assert client.get(f"{API}/auth/me", headers=auth_headers).json()["user"]["salonName"] == "Glow Studio"

    response = client.put(f"{API}/settings", json={"timezone": "Nowhere/City"}, headers=auth_headers)
    assert response.status_code == 400


def test_tenant_isolation(client, make_account, book):
    first = make_account(email="first@example.com")
    second = make_account(email="second@example.com")

    appointment = book(first).json()["appointment"]

    assert client.get(f"{API}/appointments", headers=second).json()["appointments"] == []
    assert client.get(f"{API}/dashboard", headers=second).json()["todayAppointmentCount"] == 0

    response = client.put(f"{API}/appointments/{appointment['id']}", json={"status": "completed"}, headers=second)
    assert response.status_code == 404
    listed = client.get(f"{API}/appointments", headers=first).json()["appointments"]
    assert listed[0]["status"] == "confirmed"


def test_owner_scenario(client, make_account, book):
    """The owner@example.com walkthrough from sign-up to dashboard"""
    headers = make_account(email="owner@example.com", password="password", name="Salon Owner")

    me = client.get(f"{API}/auth/me", headers=headers).json()["user"]
    assert me["name"] == "Salon Owner"

    appointment = book(headers).json()["appointment"]
    assert appointment["status"] == "confirmed"
    assert appointment["id"]

    dashboard = client.get(f"{API}/dashboard", headers=headers).json()
    assert appointment["id"] in [item["id"] for item in dashboard["recentAppointments"]]
    assert dashboard["todayRevenue"] >= 180


def test_duplicate_signup_leaves_existing_tenant_untouched(client, make_account, book):
    headers = make_account(email="owner@example.com", salon_name="First Salon")
    book(headers)

    response = client.post(f"{API}/auth/signup", json={
        "email": "owner@example.com",
        "password": "password123",
        "name": "Intruder",
        "salonName": "Other Salon",
    })
    assert response.status_code == 400

    assert client.get(f"{API}/settings", headers=headers).json()["settings"]["salonName"] == "First Salon"
    assert len(client.get(f"{API}/appointments", headers=headers).json()["appointments"]) == 1


def test_update_blanks_optional_text(client, auth_headers, book):
    appointment = book(auth_headers, clientEmail="sarah@example.com").json()["appointment"]

    response = client.put(f"{API}/appointments/{appointment['id']}",
                          json={"clientEmail": "", "notes": "  "}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["appointment"]["clientEmail"] is None
    assert response.json()["appointment"]["notes"] is None


def test_store_failure_returns_generic_error(client, auth_headers, monkeypatch):
    def broken_write(self, key, value):
        raise RuntimeError("disk gone")

    monkeypatch.setattr(SQLTenantStore, "_write", broken_write)
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = failing_client.post(f"{API}/appointments", headers=auth_headers, json={
        "clientName": "Sarah Johnson",
        "service": "Hair Color & Cut",
        "stylist": "Emma Wilson",
        "date": "2026-03-15",
        "time": "10:00",
        "price": 180,
    })

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "disk gone" not in response.text


def test_malformed_collection_returns_generic_error(client, auth_headers, db):
    tenant_id = client.get(f"{API}/auth/me", headers=auth_headers).json()["user"]["tenantId"]
    SQLTenantStore(db).set(tenant_id, tenant_store.STAFF, [{"name": "missing id"}])

    response = client.get(f"{API}/staff", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
