"""HTTP status-code contract for the patient and record endpoints."""
import uuid

import pytest

PATIENT_BODY = {
    "firstName": "Grace",
    "lastName": "Hopper",
    "dateOfBirth": "1970-12-09",
    "email": "grace@example.com",
    "phoneNumber": "555-123-4567",
    "address": "1 Navy Way",
    "lastAppointment": "2024-02-01T09:00:00Z",
    "notes": "Sensitive teeth.",
}


async def _create_patient(client, **overrides) -> dict:
    res = await client.post("/patients", json={**PATIENT_BODY, **overrides})
    assert res.status_code == 201
    return res.json()


async def _create_record(client, patient_id, **body) -> dict:
    res = await client.post(f"/patients/{patient_id}/records", json=body)
    assert res.status_code == 201
    return res.json()


class TestPatientEndpoints:
    async def test_create_returns_location_and_camel_case_body(self, client):
        res = await client.post("/patients", json=PATIENT_BODY)
        assert res.status_code == 201
        body = res.json()
        assert res.headers["location"] == f"/patients/{body['id']}"
        assert body["firstName"] == "Grace"
        assert body["nextAppointment"] is None

    async def test_create_with_existing_id_conflicts(self, client):
        created = await _create_patient(client)
        res = await client.post("/patients", json={**PATIENT_BODY, "id": created["id"]})
        assert res.status_code == 409

    async def test_get_and_list(self, client):
        created = await _create_patient(client)
        assert (await client.get(f"/patients/{created['id']}")).json()["id"] == created["id"]
        listed = (await client.get("/patients")).json()
        assert [p["id"] for p in listed] == [created["id"]]

    async def test_get_unknown_is_404(self, client):
        assert (await client.get(f"/patients/{uuid.uuid4()}")).status_code == 404

    async def test_search(self, client):
        created = await _create_patient(client)
        await _create_patient(client, firstName="Alan", lastName="Turing")

        by_name = await client.get("/patients/search", params={"q": "grace hop"})
        assert [p["id"] for p in by_name.json()] == [created["id"]]

        by_id = await client.get("/patients/search", params={"q": created["id"]})
        assert [p["id"] for p in by_id.json()] == [created["id"]]

    @pytest.mark.parametrize("params", [{}, {"q": "   "}])
    async def test_search_without_term_is_400(self, client, params):
        assert (await client.get("/patients/search", params=params)).status_code == 400

    async def test_search_without_match_is_404(self, client):
        await _create_patient(client)
        assert (await client.get("/patients/search", params={"q": "nobody"})).status_code == 404

    async def test_replace(self, client):
        created = await _create_patient(client)
        res = await client.put(f"/patients/{created['id']}", json={**PATIENT_BODY, "notes": "Updated"})
        assert res.status_code == 200
        assert res.json()["notes"] == "Updated"
        assert res.json()["id"] == created["id"]

    async def test_replace_with_mismatched_id_is_400(self, client):
        created = await _create_patient(client)
        res = await client.put(
            f"/patients/{created['id']}", json={**PATIENT_BODY, "id": str(uuid.uuid4()), "notes": "x"}
        )
        assert res.status_code == 400
        stored = (await client.get(f"/patients/{created['id']}")).json()
        assert stored["notes"] == PATIENT_BODY["notes"]

    async def test_replace_unknown_is_404(self, client):
        assert (await client.put(f"/patients/{uuid.uuid4()}", json=PATIENT_BODY)).status_code == 404

    async def test_delete(self, client):
        created = await _create_patient(client)
        assert (await client.delete(f"/patients/{created['id']}")).status_code == 204
        assert (await client.delete(f"/patients/{created['id']}")).status_code == 404


class TestRecordEndpoints:
    async def test_create_for_unknown_patient_is_404_with_id(self, client):
        missing = uuid.uuid4()
        res = await client.post(f"/patients/{missing}/records", json={"recordType": "Exam"})
        assert res.status_code == 404
        assert str(missing) in res.json()["detail"]

    async def test_create_normalizes_date_and_sets_location(self, client):
        patient = await _create_patient(client)
        res = await client.post(
            f"/patients/{patient['id']}/records",
            json={"recordType": "Exam", "recordDate": "2024-03-01T10:00:00-05:00"},
        )
        assert res.status_code == 201
        body = res.json()
        assert res.headers["location"] == f"/records/{body['id']}"
        assert body["patientId"] == patient["id"]
        assert body["recordDate"] in ("2024-03-01T15:00:00Z", "2024-03-01T15:00:00+00:00")

    async def test_overlong_field_is_rejected(self, client):
        patient = await _create_patient(client)
        res = await client.post(f"/patients/{patient['id']}/records", json={"recordType": "x" * 51})
        assert res.status_code == 422

    @pytest.mark.parametrize("field, limit", [
        ("recordType", 50),
        ("prescription", 500),
        ("notes", 2000),
        ("dentistName", 100),
    ])
    async def test_text_limits(self, client, field, limit):
        patient = await _create_patient(client)
        url = f"/patients/{patient['id']}/records"

        at_limit = await client.post(url, json={field: "a" * limit})
        assert at_limit.status_code == 201
        assert at_limit.json()[field] == "a" * limit

        over = await client.post(url, json={field: "a" * (limit + 1)})
        assert over.status_code == 422

    async def test_update_normalizes_date_to_utc(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"], recordDate="2024-01-01T00:00:00Z")

        res = await client.put(
            f"/records/{record['id']}",
            json={"id": record["id"], "recordDate": "2024-06-01T23:30:00+09:30"},
        )
        assert res.status_code == 200

        stored = (await client.get(f"/records/{record['id']}")).json()
        assert stored["recordDate"] in ("2024-06-01T14:00:00Z", "2024-06-01T14:00:00+00:00")

    async def test_list_records(self, client):
        patient = await _create_patient(client)
        assert (await client.get(f"/patients/{patient['id']}/records")).status_code == 404
        await _create_record(client, patient["id"], recordDate="2023-01-01T00:00:00Z")
        await _create_record(client, patient["id"], recordDate="2024-01-01T00:00:00Z")
        res = await client.get(f"/patients/{patient['id']}/records")
        assert res.status_code == 200
        assert [r["recordDate"][:4] for r in res.json()] == ["2024", "2023"]

    async def test_get_record(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"], recordType="Exam")
        assert (await client.get(f"/records/{record['id']}")).json()["recordType"] == "Exam"
        assert (await client.get("/records/9999")).status_code == 404

    async def test_update_with_mismatched_id_is_400_and_leaves_record(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"], recordType="Exam")
        res = await client.put(
            f"/records/{record['id']}", json={"id": record["id"] + 2, "recordType": "Changed"}
        )
        assert res.status_code == 400
        assert (await client.get(f"/records/{record['id']}")).json()["recordType"] == "Exam"

    async def test_update(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"], recordType="Exam")
        res = await client.put(f"/records/{record['id']}", json={"id": record["id"], "recordType": "Cleaning"})
        assert res.status_code == 200
        assert res.json()["recordType"] == "Cleaning"
        assert (await client.put("/records/9999", json={"recordType": "x"})).status_code == 404

    async def test_delete_record(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"])
        assert (await client.delete(f"/records/{record['id']}")).status_code == 204
        assert (await client.delete(f"/records/{record['id']}")).status_code == 404

    async def test_details(self, client):
        patient = await _create_patient(client)
        res = await client.get(f"/patients/{patient['id']}/records/details")
        assert res.status_code == 200
        assert res.json()["records"] == []

        await _create_record(client, patient["id"], recordType="Exam")
        body = (await client.get(f"/patients/{patient['id']}/records/details")).json()
        assert body["patient"] == {
            "id": patient["id"],
            "firstName": "Grace",
            "lastName": "Hopper",
            "dateOfBirth": "1970-12-09",
        }
        assert [r["recordType"] for r in body["records"]] == ["Exam"]

    async def test_details_for_unknown_patient_is_404(self, client):
        assert (await client.get(f"/patients/{uuid.uuid4()}/records/details")).status_code == 404

    async def test_records_survive_patient_delete(self, client):
        patient = await _create_patient(client)
        record = await _create_record(client, patient["id"])
        await client.delete(f"/patients/{patient['id']}")
        assert (await client.get(f"/records/{record['id']}")).status_code == 200
        assert len((await client.get(f"/patients/{patient['id']}/records")).json()) == 1


async def test_health(client):
    assert (await client.get("/health")).json() == {"status": "ok"}
