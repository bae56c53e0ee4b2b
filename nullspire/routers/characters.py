from __future__ import annotations

from fastapi import APIRouter, Request

from nullspire.services.character_service import CharacterService

router = APIRouter(prefix="/api", tags=["characters"])


def get_character_service(request: Request) -> CharacterService:
    svc = getattr(getattr(request.app, "state", None), "character_service", None)
    if not svc:
        raise RuntimeError("CharacterService not configured")
    return svc


@router.get("/characters")
def search_characters(request: Request, name: str = ""):
    svc = get_character_service(request)
    return [c.to_dict() for c in svc.list_approved(name)]


@router.post("/submit")
def submit_character(request: Request, payload: dict):
    svc = get_character_service(request)
    svc.submit(
        payload.get("name"),
        payload.get("level"),
        payload.get("organization"),
        payload.get("profession"),
    )
    return {"message": "Submission received, pending approval."}
