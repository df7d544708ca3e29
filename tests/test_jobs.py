"""
API tests for /jobs, including applying.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from jobly.main import app
from jobly.services import application_service


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


# ============================================
# POST /jobs
# ============================================

def test_create_ok_for_admin(client, seed, admin_token):
    resp = client.post(
        "/jobs",
        json={"title": "J-new", "salary": 10, "equity": 0.2, "companyHandle": "c1"},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 201
    job = resp.json()["job"]
    assert isinstance(job["id"], int)
    assert job["title"] == "J-new"
    assert job["salary"] == 10
    assert job["equity"] == pytest.approx(0.2)
    assert job["companyHandle"] == "c1"


def test_create_non_admin(client, seed, u1_token):
    resp = client.post(
        "/jobs", json={"title": "J-new", "companyHandle": "c1"}, headers=bearer(u1_token)
    )
    assert resp.status_code == 403


def test_create_anon(client, seed):
    assert client.post("/jobs", json={"title": "J-new", "companyHandle": "c1"}).status_code == 401


@pytest.mark.parametrize("body", [
    {"title": "J-new"},
    {"title": "J-new", "companyHandle": "c1", "salary": -5},
    {"title": "J-new", "companyHandle": "c1", "equity": 1.5},
    {"title": "J-new", "companyHandle": "c1", "salary": "lots"},
])
def test_create_invalid(client, seed, admin_token, body):
    assert client.post("/jobs", json=body, headers=bearer(admin_token)).status_code == 400


def test_create_unknown_company(client, seed, admin_token):
    resp = client.post(
        "/jobs", json={"title": "J-new", "companyHandle": "nope"}, headers=bearer(admin_token)
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "No company: nope"}


# ============================================
# GET /jobs
# ============================================

def test_list_all(client, seed):
    resp = client.get("/jobs")
    assert resp.status_code == 200
    assert [job["title"] for job in resp.json()["jobs"]] == ["J1", "J2", "J3", "J4"]


def test_list_title_filter(client, seed):
    resp = client.get("/jobs", params={"title": "j2"})
    assert [job["title"] for job in resp.json()["jobs"]] == ["J2"]


def test_list_salary_range(client, seed):
    resp = client.get("/jobs", params={"minSalary": 150, "maxSalary": 300})
    assert [job["title"] for job in resp.json()["jobs"]] == ["J2", "J3"]


def test_list_salary_min_greater_than_max(client, seed):
    assert client.get("/jobs", params={"minSalary": 300, "maxSalary": 100}).status_code == 400


# ============================================
# GET /jobs/{id}
# ============================================

def test_get(client, seed):
    job_id = seed["job_ids"][0]
    resp = client.get(f"/jobs/{job_id}")
    assert resp.status_code == 200
    job = resp.json()["job"]
    assert job["id"] == job_id
    assert job["title"] == "J1"
    assert job["companyHandle"] == "c1"


def test_get_not_found(client, seed):
    assert client.get("/jobs/999999").status_code == 404


# ============================================
# PATCH /jobs/{id}
# ============================================

def test_update(client, seed, admin_token):
    job_id = seed["job_ids"][0]
    resp = client.patch(f"/jobs/{job_id}", json={"title": "J-New"}, headers=bearer(admin_token))
    assert resp.status_code == 200
    job = resp.json()["job"]
    assert job["title"] == "J-New"
    assert job["salary"] == 100
    assert job["companyHandle"] == "c1"


def test_update_non_admin(client, seed, u1_token):
    job_id = seed["job_ids"][0]
    resp = client.patch(f"/jobs/{job_id}", json={"title": "J-New"}, headers=bearer(u1_token))
    assert resp.status_code == 403


def test_update_not_found(client, seed, admin_token):
    resp = client.patch("/jobs/999999", json={"title": "J-New"}, headers=bearer(admin_token))
    assert resp.status_code == 404


def test_update_company_is_immutable(client, seed, admin_token):
    job_id = seed["job_ids"][0]
    resp = client.patch(f"/jobs/{job_id}", json={"companyHandle": "c2"}, headers=bearer(admin_token))
    assert resp.status_code == 400


def test_update_empty_body(client, seed, admin_token):
    job_id = seed["job_ids"][0]
    assert client.patch(f"/jobs/{job_id}", json={}, headers=bearer(admin_token)).status_code == 400


# ============================================
# DELETE /jobs/{id}
# ============================================

def test_delete(client, seed, admin_token):
    job_id = seed["job_ids"][0]
    resp = client.delete(f"/jobs/{job_id}", headers=bearer(admin_token))
    assert resp.status_code == 200
    assert resp.json() == {"deleted": job_id}
    assert client.get(f"/jobs/{job_id}").status_code == 404


def test_delete_non_admin(client, seed, u1_token):
    assert client.delete(f"/jobs/{seed['job_ids'][0]}", headers=bearer(u1_token)).status_code == 403


def test_delete_not_found(client, seed, admin_token):
    assert client.delete("/jobs/999999", headers=bearer(admin_token)).status_code == 404


# ============================================
# POST /jobs/apply/{jobId}
# ============================================

def test_apply(client, seed, u2_token):
    job_id = seed["job_ids"][1]
    resp = client.post(f"/jobs/apply/{job_id}", headers=bearer(u2_token))
    assert resp.status_code == 200
    assert resp.json() == {"applied": job_id}


def test_apply_twice_succeeds(client, seed, u1_token):
    job_id = seed["job_ids"][0]  # u1 already applied in the seed
    resp = client.post(f"/jobs/apply/{job_id}", headers=bearer(u1_token))
    assert resp.status_code == 200
    assert resp.json() == {"applied": job_id}


def test_apply_missing_job_is_404(client, seed, u1_token):
    resp = client.post("/jobs/apply/999", headers=bearer(u1_token))
    assert resp.status_code == 404
    assert resp.json() == {"detail": "No job: 999"}


def test_apply_anon(client, seed):
    assert client.post(f"/jobs/apply/{seed['job_ids'][0]}").status_code == 401


def test_apply_store_failure_is_500(monkeypatch, seed, u2_token):
    real_run_sql = application_service.run_sql

    def failing_insert(db, sql, values=()):
        if sql.lstrip().startswith("INSERT"):
            raise OperationalError(sql, values, Exception("database is locked"))
        return real_run_sql(db, sql, values)

    monkeypatch.setattr(application_service, "run_sql", failing_insert)

    resp = TestClient(app, raise_server_exceptions=False).post(
        f"/jobs/apply/{seed['job_ids'][0]}", headers=bearer(u2_token)
    )
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


@pytest.mark.parametrize("job_id", ["0", "-1", "99999999999999999999"])
def test_out_of_range_job_id_is_400(client, seed, u1_token, admin_token, job_id):
    assert client.get(f"/jobs/{job_id}").status_code == 400
    assert client.post(f"/jobs/apply/{job_id}", headers=bearer(u1_token)).status_code == 400
    assert client.delete(f"/jobs/{job_id}", headers=bearer(admin_token)).status_code == 400
    assert client.post(f"/users/u1/jobs/{job_id}", headers=bearer(u1_token)).status_code == 400
