"""Contact API tests."""

import random

from crm.schemas.contact import ContactCreate
from crm.services.avatar import AVATAR_PALETTE, pick_avatar_color
from crm.services.contact_service import ContactService


def create_contact(client, **fields):
    payload = {"first_name": "Alex", "last_name": "Morgan", **fields}
    response = client.post("/api/contacts", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_contact(client):
    """Test creating a contact."""
    response = client.post(
        "/api/contacts",
        json={
            "first_name": "Priya",
            "last_name": "Patel",
            "email": "priya@dataflow.ai",
            "company": "DataFlow AI",
            "phone": "",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["first_name"] == "Priya"
    assert data["company"] == "DataFlow AI"
    assert data["phone"] is None
    assert data["avatar_color"] in AVATAR_PALETTE


def test_create_contact_requires_names(client):
    """Test that first and last name are required and non-blank."""
    response = client.post("/api/contacts", json={"first_name": "Solo"})
    assert response.status_code == 400

    response = client.post("/api/contacts", json={"first_name": " ", "last_name": "Blank"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "first_name"


def test_create_contact_invalid_email(client):
    """Test that a malformed email is rejected."""
    response = client.post(
        "/api/contacts", json={"first_name": "A", "last_name": "B", "email": "not-an-email"}
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


def test_avatar_color_uses_injected_random_source(db):
    """Test that the avatar colour comes from the service's random source."""
    expected = pick_avatar_color(random.Random(42))
    service = ContactService(db, rng=random.Random(42))

    contact = service.create_contact(ContactCreate(first_name="Seeded", last_name="Colour"))
    assert contact.avatar_color == expected


def test_pick_avatar_color_is_deterministic():
    """Test that equal seeds give equal colours from the palette."""
    first = [pick_avatar_color(random.Random(5)) for _ in range(3)]
    assert len(set(first)) == 1
    assert first[0] in AVATAR_PALETTE
    assert pick_avatar_color(random.Random(1), palette=("#000000",)) == "#000000"


def test_list_contacts_default_order_most_recent_first(client):
    """Test that contacts default to updated_at descending."""
    older = create_contact(client, first_name="Older")
    newer = create_contact(client, first_name="Newer")

    response = client.get("/api/contacts")
    assert [c["id"] for c in response.json()] == [newer["id"], older["id"]]


def test_list_contacts_sorted_by_first_name(client):
    """Test overriding the sort column and direction."""
    create_contact(client, first_name="Zoe")
    create_contact(client, first_name="Amir")
    create_contact(client, first_name="Mia")

    response = client.get("/api/contacts", params={"sort": "first_name", "order": "asc"})
    assert [c["first_name"] for c in response.json()] == ["Amir", "Mia", "Zoe"]

    response = client.get("/api/contacts", params={"sort": "first_name", "order": "desc"})
    assert [c["first_name"] for c in response.json()] == ["Zoe", "Mia", "Amir"]


def test_list_contacts_rejects_unknown_sort(client):
    """Test that only whitelisted sort columns are accepted."""
    response = client.get("/api/contacts", params={"sort": "notes"})
    assert response.status_code == 400


def test_search_contacts_case_insensitive(client):
    """Test search across name, email and company."""
    by_name = create_contact(client, first_name="Sarah", last_name="Chen")
    by_email = create_contact(client, first_name="Dan", email="dan@sarahs-bakery.com")
    by_company = create_contact(client, first_name="Lee", company="SARAH Holdings")
    create_contact(client, first_name="Nobody", company="Elsewhere")

    response = client.get("/api/contacts", params={"search": "sarah"})
    found = {c["id"] for c in response.json()}
    assert found == {by_name["id"], by_email["id"], by_company["id"]}


def test_search_treats_wildcards_literally(client):
    """Test that % in a search term is not a wildcard."""
    create_contact(client, first_name="Percy")
    discount = create_contact(client, first_name="Deal", company="100% Deals")

    response = client.get("/api/contacts", params={"search": "0%"})
    assert [c["id"] for c in response.json()] == [discount["id"]]


def test_get_contact_includes_tasks_and_reminders(client, contact):
    """Test that the detail view nests the contact's tasks and reminders."""
    client.post(
        "/api/tasks",
        json={"title": "Later", "contact_id": contact["id"], "due_date": "2026-12-01T00:00:00Z"},
    )
    client.post(
        "/api/tasks",
        json={"title": "Sooner", "contact_id": contact["id"], "due_date": "2026-11-01T00:00:00Z"},
    )
    client.post(
        "/api/reminders",
        json={
            "title": "Coffee",
            "reminder_date": "2026-11-05T15:00:00Z",
            "contact_id": contact["id"],
        },
    )

    response = client.get(f"/api/contacts/{contact['id']}")
    assert response.status_code == 200
    data = response.json()
    assert [task["title"] for task in data["tasks"]] == ["Sooner", "Later"]
    assert [reminder["title"] for reminder in data["reminders"]] == ["Coffee"]


def test_get_missing_contact(client):
    """Test getting an unknown contact."""
    response = client.get("/api/contacts/9999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Contact not found"


def test_update_contact_patch_semantics(client):
    """Test that absent fields are kept and empty fields cleared."""
    contact = create_contact(client, company="GrowthCo", phone="(312) 555-0144", notes="Golf")

    response = client.put(
        f"/api/contacts/{contact['id']}",
        json={"last_name": "Morgan-Lee", "phone": "", "notes": None},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["last_name"] == "Morgan-Lee"
    assert data["first_name"] == "Alex"
    assert data["company"] == "GrowthCo"
    assert data["phone"] is None
    assert data["notes"] is None


def test_update_contact_blank_first_name_rejected(client, contact):
    """Test that a required name cannot be blanked."""
    response = client.put(f"/api/contacts/{contact['id']}", json={"first_name": ""})
    assert response.status_code == 400


def test_delete_contact_cascades(client, contact):
    """Test that deleting a contact removes its reminders and unlinks its tasks."""
    task = client.post("/api/tasks", json={"title": "Linked", "contact_id": contact["id"]}).json()
    reminder = client.post(
        "/api/reminders",
        json={"title": "Ping", "reminder_date": "2026-11-05T15:00:00Z", "contact_id": contact["id"]},
    ).json()

    response = client.delete(f"/api/contacts/{contact['id']}")
    assert response.status_code == 204

    assert client.get(f"/api/contacts/{contact['id']}").status_code == 404
    assert client.get(f"/api/reminders/{reminder['id']}").status_code == 404

    response = client.get(f"/api/tasks/{task['id']}")
    assert response.status_code == 200
    assert response.json()["contact_id"] is None
    assert response.json()["contact_first_name"] is None
