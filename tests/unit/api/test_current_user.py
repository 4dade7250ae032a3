from dataclasses import fields
from uuid import uuid4

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from src.depends import CurrentUser, get_current_user


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.asyncio
async def test_current_user_from_token():
    user_id, organization_id = uuid4(), uuid4()

    current_user = await get_current_user(bearer(generate_jwt(user_id, organization_id)))

    assert current_user == CurrentUser(user_id=user_id, organization_id=organization_id)


def test_current_user_carries_identity_only():
    """Roles are read from memberships, never from the token"""
    assert [f.name for f in fields(CurrentUser)] == ["user_id", "organization_id"]


@pytest.mark.asyncio
async def test_token_without_organization_is_rejected():
    token = jwt.encode({"user_id": str(uuid4())}, ApplicationConfig.JWT_SECRET, algorithm="HS256")

    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(bearer(token))

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode(
        {"user_id": str(uuid4()), "organization_id": str(uuid4())}, "other", algorithm="HS256"
    )

    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(bearer(token))

    assert exc_info.value.status_code == 401
