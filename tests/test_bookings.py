"""Booking lifecycle tests."""
import uuid

import pytest

from courtbook.core.config import settings
from courtbook.models import Booking, User
from tests.conftest import auth


def booking_payload(court_id, **overrides):
    payload = {
        "userEmail": "pat@example.com",
        "courtId": court_id,
        "courtName": "Centre Court",
        "date": "2026-11-02",
        "slots": ["10:00"],
        "totalPrice": 50,
        "status": "approved",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_booking_forces_pending(client, store):
    court = await store.court()
    response = await client.post("/bookings", json=booking_payload(court.id))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True

    booking = await store.get(Booking, body["insertedId"])
    assert booking.status == "pending"
    assert booking.created_at is not None
    assert booking.slots == ["10:00"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"slots": []},
        {"totalPrice": None},
        {"totalPrice": 0},
        {"date": ""},
        {"courtName": "   "},
        {"userEmail": None},
    ],
)
async def test_create_booking_rejects_incomplete_request(client, store, overrides):
    court = await store.court()
    response = await client.post("/bookings", json=booking_payload(court.id, **overrides))
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_create_booking_rejects_missing_field(client, store):
    court = await store.court()
    payload = booking_payload(court.id)
    del payload["courtName"]
    response = await client.post("/bookings", json=payload)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_booking_for_unknown_court_returns_404(client):
    response = await client.post("/bookings", json=booking_payload(uuid.uuid4().hex))
    assert response.status_code == 404
    assert response.json() == {"error": "Court not found"}


@pytest.mark.asyncio
async def test_create_booking_with_malformed_court_id_returns_400(client):
    response = await client.post("/bookings", json=booking_payload("not-an-id"))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_approval_promotes_owner_to_member(client, store, admin):
    court = await store.court()
    owner = await store.user("pat@example.com")
    booking = await store.booking(court, "pat@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth(admin.email)
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Booking approved successfully."}
    assert (await store.get(Booking, booking.id)).status == "approved"
    user = await store.get(User, owner.id)
    assert user.role == "member"
    assert user.member_since is not None


@pytest.mark.asyncio
async def test_rejection_does_not_promote(client, store, admin):
    court = await store.court()
    owner = await store.user("pat@example.com")
    booking = await store.booking(court, "pat@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "rejected"}, headers=auth(admin.email)
    )

    assert response.status_code == 200
    user = await store.get(User, owner.id)
    assert user.role == "user"
    assert user.member_since is None


@pytest.mark.asyncio
async def test_approval_without_account_still_succeeds(client, store, admin):
    court = await store.court()
    booking = await store.booking(court, "nobody@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth(admin.email)
    )

    assert response.status_code == 200
    assert (await store.get(Booking, booking.id)).status == "approved"


@pytest.mark.asyncio
async def test_transition_requires_admin(client, store):
    court = await store.court()
    await store.user("pat@example.com")
    booking = await store.booking(court, "pat@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth("pat@example.com")
    )

    assert response.status_code == 403
    assert (await store.get(Booking, booking.id)).status == "pending"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["pending", "cancelled", ""])
async def test_transition_rejects_unknown_target(client, store, admin, status):
    court = await store.court()
    booking = await store.booking(court, "pat@example.com")
    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": status}, headers=auth(admin.email)
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_transition_with_malformed_id_returns_400(client, admin):
    response = await client.patch(
        "/bookings/xyz", json={"status": "approved"}, headers=auth(admin.email)
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid booking ID"}


@pytest.mark.asyncio
async def test_transition_for_missing_booking_returns_404(client, admin):
    response = await client.patch(
        f"/bookings/{uuid.uuid4().hex}", json={"status": "approved"}, headers=auth(admin.email)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "current,target",
    [
        ("pending", "confirmed"),
        ("pending", "paid"),
        ("rejected", "approved"),
        ("paid", "approved"),
        ("confirmed", "rejected"),
        ("approved", "approved"),
    ],
)
async def test_illegal_transitions_are_rejected(client, store, admin, monkeypatch, current, target):
    monkeypatch.setattr(settings, "ENFORCE_BOOKING_TRANSITIONS", True)
    court = await store.court()
    booking = await store.booking(court, "pat@example.com", status=current)

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": target}, headers=auth(admin.email)
    )

    assert response.status_code == 400
    assert (await store.get(Booking, booking.id)).status == current


@pytest.mark.asyncio
async def test_full_lifecycle_through_transition_table(client, store, admin, monkeypatch):
    monkeypatch.setattr(settings, "ENFORCE_BOOKING_TRANSITIONS", True)
    court = await store.court()
    booking = await store.booking(court, "pat@example.com")

    for target in ("approved", "confirmed", "paid"):
        response = await client.patch(
            f"/bookings/{booking.id}", json={"status": target}, headers=auth(admin.email)
        )
        assert response.status_code == 200
        assert (await store.get(Booking, booking.id)).status == target


@pytest.mark.asyncio
async def test_default_mode_allows_any_target(client, store, admin):
    court = await store.court()
    await store.user("pat@example.com")
    booking = await store.booking(court, "pat@example.com", status="paid")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth(admin.email)
    )
    assert response.status_code == 200
    assert (await store.get(Booking, booking.id)).status == "approved"

    # Still no way back to pending
    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "pending"}, headers=auth(admin.email)
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_admin_listing_filters_by_status_and_court_name(client, store, admin):
    court = await store.court()
    await store.booking(court, "a@example.com", court_name="Centre Court")
    await store.booking(court, "b@example.com", court_name="Clay Court 2", status="approved")
    await store.booking(court, "c@example.com", court_name="centre annex", status="approved")

    response = await client.get("/bookings", headers=auth(admin.email))
    assert len(response.json()) == 3

    response = await client.get("/bookings?status=approved", headers=auth(admin.email))
    assert {b["userEmail"] for b in response.json()} == {"b@example.com", "c@example.com"}

    response = await client.get("/bookings?search=CENTRE", headers=auth(admin.email))
    assert {b["userEmail"] for b in response.json()} == {"a@example.com", "c@example.com"}

    response = await client.get(
        "/bookings?status=approved&search=centre", headers=auth(admin.email)
    )
    assert [b["userEmail"] for b in response.json()] == ["c@example.com"]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(client, store, admin):
    court = await store.court()
    await store.booking(court, "a@example.com", court_name="Court A")

    response = await client.get("/bookings?search=%25", headers=auth(admin.email))
    assert response.json() == []


@pytest.mark.asyncio
async def test_user_status_lists(client, store):
    court = await store.court()
    await store.user("pat@example.com")
    await store.booking(court, "pat@example.com", status="pending")
    await store.booking(court, "pat@example.com", status="approved")
    await store.booking(court, "pat@example.com", status="paid")
    await store.booking(court, "other@example.com", status="paid")

    for status in ("pending", "approved", "paid"):
        response = await client.get(
            f"/bookings/{status}/pat@example.com", headers=auth("pat@example.com")
        )
        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["status"] == status
        assert body[0]["userEmail"] == "pat@example.com"


@pytest.mark.asyncio
async def test_user_status_list_requires_credential(client):
    response = await client.get("/bookings/paid/pat@example.com")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_booking_by_id(client, store):
    court = await store.court()
    booking = await store.booking(court, "pat@example.com")

    response = await client.get(f"/bookings/{booking.id}", headers=auth("pat@example.com"))
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == booking.id
    assert body["courtId"] == court.id
    assert body["totalPrice"] == 50.0

    response = await client.get(f"/bookings/{uuid.uuid4().hex}", headers=auth("pat@example.com"))
    assert response.status_code == 404

    response = await client.get("/bookings/bad-id", headers=auth("pat@example.com"))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_booking(client, store):
    court = await store.court()
    booking = await store.booking(court, "pat@example.com")

    response = await client.delete(f"/bookings/{booking.id}", headers=auth("pat@example.com"))
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert await store.get(Booking, booking.id) is None

    response = await client.delete(f"/bookings/{booking.id}", headers=auth("pat@example.com"))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_default_mode_allows_admin_pending_to_paid(client, store, admin):
    court = await store.court()
    booking = await store.booking(court, "pat@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "paid"}, headers=auth(admin.email)
    )

    assert response.status_code == 200
    assert (await store.get(Booking, booking.id)).status == "paid"


@pytest.mark.asyncio
async def test_repeated_approval_keeps_member_and_refreshes_member_since(client, store, admin):
    court = await store.court()
    owner = await store.user("pat@example.com")
    booking = await store.booking(court, "pat@example.com")

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth(admin.email)
    )
    assert response.status_code == 200
    first = (await store.get(User, owner.id)).member_since

    response = await client.patch(
        f"/bookings/{booking.id}", json={"status": "approved"}, headers=auth(admin.email)
    )
    assert response.status_code == 200

    user = await store.get(User, owner.id)
    assert user.role == "member"
    assert user.member_since >= first
