"""Auth metadata DTOs."""

from pydantic import BaseModel, Field


class APIKeyAccess(BaseModel):
    """Authorizations granted to an API key."""

    boards: bool = False
    columns: bool = False
    create_datasets: bool = False
    events: bool = False
    markers: bool = False
    queries: bool = False
    recipients: bool = False
    slos: bool = False
    triggers: bool = False


class NamedSlug(BaseModel):
    """Name and slug pair of a team or environment."""

    # Empty for Classic environments
    name: str = ""
    slug: str = ""


class AuthMetadata(BaseModel):
    """Authorizations granted to an API key within a team and environment."""

    api_key_access: APIKeyAccess = Field(default_factory=APIKeyAccess)
    environment: NamedSlug = Field(default_factory=NamedSlug)
    team: NamedSlug = Field(default_factory=NamedSlug)
