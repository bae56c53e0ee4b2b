"""Admin moderation endpoints, guarded by the shared admin credential."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from nullspire.core.security import CredentialVerifier, require_credential
from nullspire.routers.characters import get_character_service

ADMIN_HEADER = "x-admin-password"


def _get_verifier(request: Request) -> CredentialVerifier:
    verifier = getattr(getattr(request.app, "state", None), "credential_verifier", None)
    if not verifier:
        raise RuntimeError("Credential verifier not configured")
    return verifier


def require_admin(request: Request) -> None:
    require_credential(_get_verifier(request), request.headers.get(ADMIN_HEADER))


router = APIRouter(prefix="/api", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/pending")
def list_pending(request: Request):
    svc = get_character_service(request)
    return [c.to_dict() for c in svc.list_pending()]


@router.post("/pending/approve")
def approve_pending(request: Request, payload: dict):
    svc = get_character_service(request)
    record = svc.approve(payload.get("id"))
    return {"message": "Character approved", "character": record.to_dict()}


@router.post("/pending/reject")
def reject_pending(request: Request, payload: dict):
    svc = get_character_service(request)
    svc.reject(payload.get("id"))
    return {"message": "Character rejected"}


@router.get("/approved")
def list_approved(request: Request):
    svc = get_character_service(request)
    return [c.to_dict() for c in svc.list_approved_all()]


@router.post("/approved/delete")
def delete_approved(request: Request, payload: dict):
    svc = get_character_service(request)
    svc.delete_approved(payload.get("id"))
    return {"message": "Character deleted"}


@router.post("/approved/edit")
def edit_approved(request: Request, payload: dict):
    svc = get_character_service(request)
    record = svc.edit_approved(payload.get("id"), payload.get("field"), payload.get("value"))
    return {"message": "Character updated", "character": record.to_dict()}
