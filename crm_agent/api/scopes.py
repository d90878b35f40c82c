"""OAuth scope REST API routes."""

from fastapi import APIRouter

from ..constants.scopes import (
    AVAILABLE_SCOPES,
    DEFAULT_SCOPES,
    COMMON_SCOPE_SETS,
    get_scopes_by_category,
)
from ..models.scopes import ScopesResponse, ScopeCatalogResponse, ScopeInfo, ScopeSet
from .responses import envelope_response

router = APIRouter(prefix="/api/ghl", tags=["OAuth"])


@router.get("/scopes", response_model=ScopesResponse)
async def get_scopes():
    """
    Get the OAuth scopes supported by the CRM integration.

    Returns:
        All supported scopes and the default subset
    """
    return envelope_response(
        ScopesResponse(
            scopes=list(AVAILABLE_SCOPES),
            default_scopes=list(DEFAULT_SCOPES)
        )
    )


@router.get("/scopes/catalog", response_model=ScopeCatalogResponse)
async def get_scope_catalog():
    """Get the annotated scope catalog grouped by category, plus common scope sets."""
    categories = {
        category: [ScopeInfo(**scope.to_dict()) for scope in scopes]
        for category, scopes in get_scopes_by_category().items()
    }
    common_sets = {key: ScopeSet(**value) for key, value in COMMON_SCOPE_SETS.items()}

    return envelope_response(
        ScopeCatalogResponse(categories=categories, common_sets=common_sets)
    )
