"""Route tests for system management endpoints."""

from fastapi import status

from access.domain.value_objects import SystemId


def _create(client, headers, actor, owner, **overrides):
    body = {
        "name": "Workday",
        "description": "HR platform",
        "category": "HR",
        "owner_id": owner.id.value,
    }
    body.update(overrides)
    return client.post("/access/systems", json=body, headers=headers(actor))


class TestCreateSystem:
    def test_admin_creates_system(self, client, headers, admin, jane):
        response = _create(client, headers, admin, jane)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["name"] == "Workday"
        assert body["owner"]["name"] == "Jane Smith"
        assert body["co_owners"] == []
        assert body["approved"] is False

    def test_member_gets_403(self, client, headers, jane):
        response = _create(client, headers, jane, jane)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unknown_owner_gets_404(self, client, headers, admin):
        response = _create(
            client, headers, admin, admin, owner_id="01HZZZZZZZZZZZZZZZZZZZZZZZ"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_owner_id_gets_400(self, client, headers, admin):
        response = _create(client, headers, admin, admin, owner_id="!" * 26)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_category_gets_422(self, client, headers, admin, jane):
        response = _create(client, headers, admin, jane, category="Legal")

        assert response.status_code == 422

    def test_owner_as_co_owner_gets_400(self, client, headers, admin, jane):
        response = _create(
            client, headers, admin, jane, co_owner_ids=[jane.id.value]
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestReadSystems:
    def test_unapproved_system_is_403_for_strangers(
        self, client, headers, admin, jane, robert
    ):
        system_id = _create(client, headers, admin, jane).json()["id"]

        response = client.get(f"/access/systems/{system_id}", headers=headers(robert))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_listing_with_filters(self, client, headers, admin, jane):
        _create(client, headers, admin, jane)
        _create(client, headers, admin, jane, name="NetSuite", category="Finance")

        response = client.get(
            "/access/systems", params={"category": "Finance"}, headers=headers(admin)
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["count"] == 1
        assert body["systems"][0]["name"] == "NetSuite"

    def test_listing_by_approval(self, client, headers, admin, jane):
        _create(client, headers, admin, jane, approved=True)
        _create(client, headers, admin, jane, name="Greenhouse")

        approved = client.get(
            "/access/systems", params={"approved": "true"}, headers=headers(admin)
        )
        pending = client.get(
            "/access/systems", params={"approved": "false"}, headers=headers(admin)
        )
        everything = client.get("/access/systems", headers=headers(admin))

        assert [s["name"] for s in approved.json()["systems"]] == ["Workday"]
        assert [s["name"] for s in pending.json()["systems"]] == ["Greenhouse"]
        assert everything.json()["count"] == 2

    def test_unknown_system_is_404(self, client, headers, admin):
        response = client.get(
            f"/access/systems/{SystemId.generate().value}", headers=headers(admin)
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_system_id_is_400(self, client, headers, admin):
        response = client.get("/access/systems/not-an-id", headers=headers(admin))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Invalid system ID format"

    def test_permissions(self, client, headers, admin, jane):
        system_id = _create(client, headers, admin, jane).json()["id"]

        response = client.get(
            f"/access/systems/{system_id}/permissions", headers=headers(jane)
        )

        assert response.json() == {
            "system_id": system_id,
            "can_view": True,
            "can_manage": True,
            "can_delete": False,
            "can_approve": False,
        }


class TestMutations:
    def test_owner_updates_and_admin_approves(self, client, headers, admin, jane):
        system_id = _create(client, headers, admin, jane).json()["id"]

        updated = client.patch(
            f"/access/systems/{system_id}",
            json={"description": "HR suite"},
            headers=headers(jane),
        )
        denied = client.put(
            f"/access/systems/{system_id}/approval",
            json={"approved": True},
            headers=headers(jane),
        )
        approved = client.put(
            f"/access/systems/{system_id}/approval",
            json={"approved": True},
            headers=headers(admin),
        )

        assert updated.json()["description"] == "HR suite"
        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert approved.json()["approved"] is True

    def test_co_owner_lifecycle(self, client, headers, admin, jane, mike):
        system_id = _create(client, headers, admin, jane).json()["id"]

        added = client.post(
            f"/access/systems/{system_id}/co-owners",
            json={"user_id": mike.id.value},
            headers=headers(jane),
        )
        duplicate = client.post(
            f"/access/systems/{system_id}/co-owners",
            json={"user_id": mike.id.value},
            headers=headers(jane),
        )
        removed = client.delete(
            f"/access/systems/{system_id}/co-owners/{mike.id.value}",
            headers=headers(jane),
        )

        assert added.status_code == status.HTTP_201_CREATED
        assert [u["name"] for u in added.json()["co_owners"]] == ["Mike Johnson"]
        assert duplicate.status_code == status.HTTP_400_BAD_REQUEST
        assert removed.status_code == status.HTTP_200_OK
        assert removed.json()["co_owners"] == []

    def test_only_admin_deletes(self, client, headers, admin, jane):
        system_id = _create(client, headers, admin, jane).json()["id"]

        denied = client.delete(f"/access/systems/{system_id}", headers=headers(jane))
        deleted = client.delete(f"/access/systems/{system_id}", headers=headers(admin))
        gone = client.get(f"/access/systems/{system_id}", headers=headers(admin))

        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert gone.status_code == status.HTTP_404_NOT_FOUND
