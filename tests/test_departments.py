"""
Tests for department endpoints.
"""

import pytest
from fastapi import status

BASE = "/api/department"


async def create_department(async_client, **overrides):
    payload = {"name": "CS", "address": "Bldg A", "code": "CS01"}
    payload.update(overrides)
    response = await async_client.post(f"{BASE}/saveDepartmnt", json=payload)
    assert response.status_code == status.HTTP_200_OK
    return response.json()


@pytest.mark.asyncio
async def test_create_department(async_client):
    """Test creating a department."""
    data = await create_department(async_client)

    assert isinstance(data["id"], int)
    assert data["name"] == "CS"
    assert data["address"] == "Bldg A"
    assert data["code"] == "CS01"


@pytest.mark.asyncio
async def test_create_department_ignores_client_id(async_client):
    data = await create_department(async_client, id=500)

    assert data["id"] != 500


@pytest.mark.asyncio
async def test_create_department_optional_fields(async_client):
    response = await async_client.post(f"{BASE}/saveDepartmnt", json={"name": "Law"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["address"] is None
    assert data["code"] is None


@pytest.mark.asyncio
async def test_get_departments(async_client):
    """Test getting all departments."""
    response = await async_client.get(f"{BASE}/getDepts")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []

    await create_department(async_client)
    await create_department(async_client, name="Physics", code="PH01")

    response = await async_client.get(f"{BASE}/getDepts")
    assert response.status_code == status.HTTP_200_OK
    assert sorted(d["name"] for d in response.json()) == ["CS", "Physics"]


@pytest.mark.asyncio
async def test_get_department_by_id(async_client):
    created = await create_department(async_client)

    response = await async_client.get(f"{BASE}/getDept/{created['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_department_by_id_not_found(async_client):
    response = await async_client.get(f"{BASE}/getDept/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Department not found with id:999"


@pytest.mark.asyncio
async def test_get_department_by_code(async_client):
    created = await create_department(async_client)

    response = await async_client.get(f"{BASE}/getDeptByCode/CS01")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_department_by_code_missing_returns_null(async_client):
    response = await async_client.get(f"{BASE}/getDeptByCode/XX99")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() is None


@pytest.mark.asyncio
async def test_delete_department(async_client):
    created = await create_department(async_client)

    response = await async_client.delete(f"{BASE}/delete/{created['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.text == "Department deleted successfully"

    response = await async_client.get(f"{BASE}/getDept/{created['id']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_missing_department_still_confirms(async_client):
    response = await async_client.delete(f"{BASE}/delete/999")

    assert response.status_code == status.HTTP_200_OK
    assert response.text == "Department deleted successfully"


@pytest.mark.asyncio
async def test_update_department_partial(async_client):
    created = await create_department(async_client)

    response = await async_client.put(
        f"{BASE}/update/{created['id']}",
        json={"name": "", "address": "Bldg B", "code": None},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": created["id"],
        "name": "CS",
        "address": "Bldg B",
        "code": "CS01",
    }

    response = await async_client.get(f"{BASE}/getDept/{created['id']}")
    assert response.json()["address"] == "Bldg B"


@pytest.mark.asyncio
async def test_update_department_ignores_body_id(async_client):
    created = await create_department(async_client)

    response = await async_client.put(
        f"{BASE}/update/{created['id']}",
        json={"id": 12345, "code": "CS02"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == created["id"]
    assert response.json()["code"] == "CS02"


@pytest.mark.asyncio
async def test_update_missing_department_is_server_error(async_client):
    response = await async_client.put(
        f"{BASE}/update/999",
        json={"name": "Physics"},
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR



@pytest.mark.asyncio
async def test_update_rejects_invalid_merged_record(async_client):
    """Blank names and over-long addresses are refused on update and nothing is stored."""
    created = await create_department(async_client)

    response = await async_client.put(
        f"{BASE}/update/{created['id']}",
        json={"address": "x" * 500, "name": "   "},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["error"] == "Validation Failed"
    assert sorted(v["field"] for v in body["violations"]) == ["address", "name"]

    response = await async_client.get(f"{BASE}/getDept/{created['id']}")
    assert response.json() == created
