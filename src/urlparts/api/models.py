"""
API response models.

Defines Pydantic models for the parse / domain / join endpoints.
"""

from pydantic import BaseModel, Field


class DomainResponse(BaseModel):
    """Response for GET /v1/domain/{host}."""

    host: str = Field(..., description="Host as queried (lower-cased)")
    public_suffix: str | None = Field(None, description="Public suffix, e.g. co.uk")
    registrable_domain: str | None = Field(
        None, description="Public suffix plus one label"
    )
    subdomain: str | None = Field(
        None, description="Labels left of the registrable domain"
    )


class UrlPartsResponse(BaseModel):
    """Response for GET /v1/parse and GET /v1/join."""

    url: str = Field(..., description="URL rendered from its parts")
    absolute: bool = Field(..., description="True when scheme and host are present")
    scheme: str | None = Field(None, description="URL scheme")
    host: str | None = Field(None, description="Lower-cased host")
    port: int | None = Field(None, description="Explicit port")
    user: str | None = Field(None, description="User name")
    password: str | None = Field(None, description="Password")
    path: str | None = Field(None, description="Path")
    query: str | None = Field(None, description="Query string without '?'")
    fragment: str | None = Field(None, description="Fragment without '#'")
    public_suffix: str | None = Field(None, description="Public suffix of the host")
    registrable_domain: str | None = Field(
        None, description="Registrable domain of the host"
    )
    subdomain: str | None = Field(None, description="Subdomain of the host")
    canonical: str | None = Field(
        None, description="Reversed-label host followed by path and query"
    )
    resource: str | None = Field(None, description="Path and query")
