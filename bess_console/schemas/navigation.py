"""
Schemas de navegação (menu lateral e guarda de rotas).
"""

from pydantic import BaseModel


class MenuItem(BaseModel):
    name: str
    path: str


class RouteDecisionResponse(BaseModel):
    """Decisão do guarda para uma página."""

    path: str
    allowed: bool
    status_code: int
    redirect_to: str | None = None
    title: str | None = None
