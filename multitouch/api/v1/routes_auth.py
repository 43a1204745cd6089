# File: multitouch/api/v1/routes_auth.py

"""
Auth API routes.

Registration goes through the user store's two insert paths. Login compares
the submitted password with the stored one as plain strings; no hashing or
token issuing happens here yet.
"""

import hmac
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, status

from multitouch.api.deps import get_user_store
from multitouch.core.exceptions import StorageError
from multitouch.schemas.user import UserCreate, UserCreateFull, UserIdRead, UserLogin
from multitouch.services.user_store import NOT_FOUND_UID, UserStore, is_integrity_violation

router = APIRouter()


def _email_taken() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Email already registered.",
    )


def _register(store: UserStore, email: str, insert: Callable[[], int]) -> UserIdRead:
    # The unique email constraint is the real guard; the lookup only saves
    # a failed insert in the common case.
    if store.find_user_id_by_email(email) != NOT_FOUND_UID:
        raise _email_taken()

    try:
        count = insert()
    except StorageError as exc:
        if is_integrity_violation(exc):
            raise _email_taken() from exc
        raise

    uid = store.find_user_id_by_email(email)
    if count == 0 or uid == NOT_FOUND_UID:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User was not stored.",
        )
    return UserIdRead(uid=uid)


@router.post(
    "/register",
    response_model=UserIdRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register with username, password and email",
)
def register(payload: UserCreate, store: UserStore = Depends(get_user_store)):
    return _register(
        store,
        payload.email,
        lambda: store.create_basic_user(payload.username, payload.password, payload.email),
    )


@router.post(
    "/register/full",
    response_model=UserIdRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register with profile fields and no username",
)
def register_full(payload: UserCreateFull, store: UserStore = Depends(get_user_store)):
    return _register(
        store,
        payload.email,
        lambda: store.create_full_user(
            payload.password,
            payload.email,
            payload.legal_name,
            payload.institution,
        ),
    )


@router.post("/login", response_model=UserIdRead, summary="User login")
def login(payload: UserLogin, store: UserStore = Depends(get_user_store)):
    stored = store.find_password_by_email(payload.email)
    if stored is None or not hmac.compare_digest(stored.encode(), payload.password.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )
    return UserIdRead(uid=store.find_user_id_by_email(payload.email))
