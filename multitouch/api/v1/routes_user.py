# File: multitouch/api/v1/routes_user.py

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from multitouch.api.deps import get_user_store
from multitouch.core.exceptions import StorageError
from multitouch.schemas.user import ProjectIdsRead, UserRead, UserUpdate
from multitouch.services.user_store import UserStore, is_integrity_violation

router = APIRouter()

# User ids are 64-bit signed integers in the database.
MAX_UID = 2**63 - 1

UidPath = Annotated[int, Path(ge=0, le=MAX_UID)]


@router.get("/{uid}", response_model=UserRead, summary="User settings")
def read_user(uid: UidPath, store: UserStore = Depends(get_user_store)):
    profile = store.get_user_profile(uid)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return UserRead(**profile)


@router.put("/{uid}", response_model=UserRead, summary="Replace user settings")
def update_user(uid: UidPath, payload: UserUpdate, store: UserStore = Depends(get_user_store)):
    """
    Rewrite every settings field of the user.

    There is no partial update: omitted optional fields are stored as null.
    """
    try:
        count = store.update_user(
            uid,
            payload.username,
            payload.password,
            payload.email,
            payload.legal_name,
            payload.institution,
        )
    except StorageError as exc:
        if is_integrity_violation(exc):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered.",
            ) from exc
        raise
    if count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return UserRead(**store.get_user_profile(uid))


@router.get("/{uid}/projects", response_model=ProjectIdsRead, summary="Projects owned by a user")
def list_user_projects(uid: UidPath, store: UserStore = Depends(get_user_store)):
    return ProjectIdsRead(pids=store.list_project_ids_for_user(uid))
