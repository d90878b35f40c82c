"""OAuth scope API models."""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ScopesResponse(BaseModel):
    """Response model for the supported OAuth scopes."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    scopes: List[str] = Field(description="Every scope the integration supports")
    default_scopes: List[str] = Field(alias="defaultScopes", description="Scopes requested by default")


class ScopeInfo(BaseModel):
    """A catalog scope with display metadata."""

    model_config = ConfigDict(populate_by_name=True)

    value: str
    label: str
    description: str
    category: str
    requires_approval: bool = Field(default=False, alias="requiresApproval")
    approval_type: Optional[str] = Field(default=None, alias="approvalType")


class ScopeSet(BaseModel):
    """A named combination of scopes."""

    name: str
    scopes: str


class ScopeCatalogResponse(BaseModel):
    """Response model for the annotated scope catalog."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    categories: Dict[str, List[ScopeInfo]]
    common_sets: Dict[str, ScopeSet] = Field(alias="commonSets")
