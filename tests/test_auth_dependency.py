"""
Tests for the authorization gate: the predicates on their own, and the
dependencies mounted on a throwaway app.
"""
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from jobly.core.auth_dependency import (
    is_authenticated,
    is_admin,
    is_self_or_admin,
    ensure_logged_in,
    ensure_admin,
    ensure_correct_user_or_admin,
)
from jobly.core.errors import JoblyError
from jobly.core.security import TokenPayload, create_access_token
from jobly.main import jobly_error_handler

ALICE = TokenPayload(username="alice", is_admin=False)
BOB = TokenPayload(username="bob", is_admin=False)
ADMIN = TokenPayload(username="root", is_admin=True)


def test_is_authenticated():
    assert is_authenticated(ALICE)
    assert not is_authenticated(None)


def test_is_admin():
    assert is_admin(ADMIN)
    assert not is_admin(ALICE)
    assert not is_admin(None)


@pytest.mark.parametrize("credential,expected", [
    (ALICE, True),
    (ADMIN, True),
    (BOB, False),
    (None, False),
])
def test_is_self_or_admin(credential, expected):
    assert is_self_or_admin(credential, "alice") is expected


# ============================================
# Dependencies
# ============================================

gate_app = FastAPI()
gate_app.add_exception_handler(JoblyError, jobly_error_handler)


@gate_app.get("/public")
def public():
    return {"ok": True}


@gate_app.get("/logged-in")
def logged_in(credential: TokenPayload = Depends(ensure_logged_in)):
    return {"username": credential.username}


@gate_app.get("/admin", dependencies=[Depends(ensure_admin)])
def admin_only():
    return {"ok": True}


@gate_app.patch("/users/{username}", dependencies=[Depends(ensure_correct_user_or_admin)])
def patch_user(username: str):
    return {"username": username}


gate_client = TestClient(gate_app)


def bearer(username, admin=False):
    return {"Authorization": f"Bearer {create_access_token(username, admin)}"}


def test_public_needs_nothing():
    assert gate_client.get("/public").status_code == 200


def test_logged_in():
    resp = gate_client.get("/logged-in", headers=bearer("alice"))
    assert resp.status_code == 200
    assert resp.json() == {"username": "alice"}


def test_logged_in_anon():
    assert gate_client.get("/logged-in").status_code == 401


def test_logged_in_bad_token():
    resp = gate_client.get("/logged-in", headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 401


def test_admin_anon_is_401():
    assert gate_client.get("/admin").status_code == 401


def test_admin_non_admin_is_403():
    assert gate_client.get("/admin", headers=bearer("alice")).status_code == 403


def test_admin_ok():
    assert gate_client.get("/admin", headers=bearer("root", admin=True)).status_code == 200


def test_self_or_admin_allows_self():
    assert gate_client.patch("/users/alice", headers=bearer("alice")).status_code == 200


def test_self_or_admin_allows_admin():
    assert gate_client.patch("/users/alice", headers=bearer("root", admin=True)).status_code == 200


def test_self_or_admin_rejects_other_user():
    assert gate_client.patch("/users/alice", headers=bearer("bob")).status_code == 403


def test_self_or_admin_anon():
    assert gate_client.patch("/users/alice").status_code == 401
