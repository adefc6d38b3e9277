"""
tests.test_auth_service

AuthService input checks and provider-error translation.
"""

from __future__ import annotations

import pytest

from classroom_api.errors import ApiError
from classroom_api.services.auth_service import AuthService
from tests.fakes import FakeFirestore, FakeIdentity


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("verify_token", (None,)),
        ("get_user_by_uid", (None,)),
        ("create_custom_token", ("",)),
        ("set_custom_user_claims", ("teacher-1", None)),
        ("set_user_role", ("teacher-1", None)),
        ("get_user_role", (None,)),
        ("revoke_refresh_tokens", (None,)),
        ("create_user", ("a@b.test", "A", "student", None)),
    ],
)
async def test_missing_input_is_bad_request(
    auth_service: AuthService, method: str, args: tuple
) -> None:
    with pytest.raises(ApiError) as exc_info:
        await getattr(auth_service, method)(*args)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid input data"


@pytest.mark.asyncio
async def test_get_user_by_uid_unknown_is_not_found(auth_service: AuthService) -> None:
    with pytest.raises(ApiError) as exc_info:
        await auth_service.get_user_by_uid("ghost")
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_set_custom_user_claims_failure(
    auth_service: AuthService, identity: FakeIdentity
) -> None:
    identity.fail.add("set_custom_user_claims")

    with pytest.raises(ApiError) as exc_info:
        await auth_service.set_custom_user_claims("teacher-1", {"role": "admin"})
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Error setting custom claims"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_set_user_role_on_missing_document(auth_service: AuthService) -> None:
    with pytest.raises(ApiError) as exc_info:
        await auth_service.set_user_role("ghost", "admin")
    assert exc_info.value.message == "Error setting user role"


@pytest.mark.asyncio
async def test_set_user_role_keeps_inner_error(
    auth_service: AuthService, identity: FakeIdentity
) -> None:
    identity.fail.add("revoke_refresh_tokens")

    with pytest.raises(ApiError) as exc_info:
        await auth_service.set_user_role("teacher-1", "admin")
    assert exc_info.value.message == "Error revoking refresh tokens"


@pytest.mark.asyncio
async def test_get_user_role_store_failure(
    auth_service: AuthService, firestore: FakeFirestore
) -> None:
    firestore.fail.add("get")

    with pytest.raises(ApiError) as exc_info:
        await auth_service.get_user_role("teacher-1")
    assert exc_info.value.message == "Error getting user role"


@pytest.mark.asyncio
async def test_create_user_writes_identity_document_and_claims(
    auth_service: AuthService, identity: FakeIdentity, firestore: FakeFirestore
) -> None:
    class_ref = firestore.collection("classes").document("c-2")

    uid = await auth_service.create_user("n@school.test", "Nia", "student", class_ref)

    assert identity.users[uid].display_name == "Nia"
    assert firestore.docs[f"users/{uid}"] == {
        "email": "n@school.test",
        "name": "Nia",
        "role": "student",
        "class": class_ref,
    }
    assert identity.claims[uid] == {"role": "student"}
    assert identity.revoked == [uid]


@pytest.mark.asyncio
async def test_create_user_identity_failure(
    auth_service: AuthService, identity: FakeIdentity, firestore: FakeFirestore
) -> None:
    identity.fail.add("create_user")
    class_ref = firestore.collection("classes").document("c-2")

    with pytest.raises(ApiError) as exc_info:
        await auth_service.create_user("n@school.test", "Nia", "student", class_ref)
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Error creating user"
