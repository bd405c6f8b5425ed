"""Dossier field catalogue endpoint."""
from fastapi import APIRouter

from initiative_scoring.catalogue import DossierCatalogue, get_catalogue

router = APIRouter(prefix="/api/v1/catalogue", tags=["Catalogue"])


@router.get(
    "",
    response_model=DossierCatalogue,
    summary="Get Field Catalogue",
    description="Versioned dossier template: scoring configuration and all field descriptors.",
)
async def read_catalogue():
    return get_catalogue()
