"""
Sessão do console e guarda de rotas.

A sessão é um marcador "user" com JSON `{"email": ..., "role": ...}`.
Não há assinatura nem expiração: o guarda só decide para qual página o
usuário deve ir.
"""

import json
from dataclasses import dataclass

import structlog
from fastapi import status

from bess_console.core.exceptions import InvalidSessionError
from bess_console.models.user import Role

logger = structlog.get_logger()

LOGIN_PATH = "/"
DASHBOARD_PATH = "/dashboard"
MAINTENANCE_PATH = "/manutencoes"

PUBLIC_ROUTES = {
    "/": "Login",
    "/recuperar-senha": "Recuperar senha",
    "/cadastro-usuario": "Cadastro de usuário",
}

# Páginas gerais: técnicos são levados para as manutenções
GENERAL_ROUTES = {
    "/dashboard": "Dashboard",
    "/clientes": "Clientes",
    "/administradores": "Administradores",
    "/bess": "BESS",
}

# Páginas de técnicos: demais papéis voltam ao dashboard
MAINTENANCE_ROUTES = {
    "/manutencoes": "Ordens de Manutenção",
}

SHARED_ROUTES = {
    "/perfil": "Perfil",
}


@dataclass(frozen=True)
class SessionUser:
    """Conteúdo do marcador de sessão."""

    email: str
    role: Role

    def to_json(self) -> str:
        return json.dumps({"email": self.email, "role": self.role.value})


@dataclass(frozen=True)
class RouteDecision:
    """Resultado do guarda para uma página."""

    path: str
    allowed: bool
    status_code: int
    redirect_to: str | None = None
    title: str | None = None


def role_for_email(email: str) -> Role:
    """Papel derivado do e-mail no login de demonstração."""
    if "tecnico" in email:
        return Role.TECHNICIAN
    if "gerente" in email:
        return Role.TECHNICAL_MANAGER
    return Role.ADMINISTRATOR


def home_for_role(role: Role) -> str:
    """Página inicial após o login."""
    return MAINTENANCE_PATH if role.is_maintenance else DASHBOARD_PATH


def parse_session(raw: str | None) -> SessionUser | None:
    """
    Lê o marcador de sessão.

    Retorna None quando não há marcador. JSON corrompido ou papel
    desconhecido levanta InvalidSessionError.
    """
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidSessionError("JSON malformado") from e

    if not isinstance(payload, dict) or not payload.get("email"):
        raise InvalidSessionError("e-mail ausente")
    try:
        role = Role(payload.get("role"))
    except ValueError as e:
        raise InvalidSessionError(f"papel desconhecido: {payload.get('role')}") from e

    return SessionUser(email=str(payload["email"]), role=role)


def _normalize(path: str) -> str:
    path = "/" + path.strip().strip("/")
    return path.split("?", 1)[0]


def _maintenance_title(path: str) -> str | None:
    if path in MAINTENANCE_ROUTES:
        return MAINTENANCE_ROUTES[path]
    # /manutencoes/{order_id}/relatorio
    parts = path.strip("/").split("/")
    if len(parts) == 3 and parts[0] == "manutencoes" and parts[2] == "relatorio" and parts[1]:
        return f"Relatório de Manutenção - Ordem {parts[1]}"
    return None


def resolve_route(path: str, raw_session: str | None) -> RouteDecision:
    """
    Decide o acesso a uma página do console.

    Sessão corrompida é tratada como ausente: volta para o login.
    """
    path = _normalize(path)

    if path in PUBLIC_ROUTES:
        return RouteDecision(path, True, status.HTTP_200_OK, title=PUBLIC_ROUTES[path])

    maintenance_title = _maintenance_title(path)
    title = (
        GENERAL_ROUTES.get(path)
        or SHARED_ROUTES.get(path)
        or maintenance_title
    )
    if title is None:
        return RouteDecision(path, False, status.HTTP_404_NOT_FOUND, title="Página não encontrada")

    try:
        user = parse_session(raw_session)
    except InvalidSessionError as e:
        logger.warning("Sessão inválida descartada", path=path, reason=e.message)
        user = None

    if user is None:
        return RouteDecision(path, False, status.HTTP_307_TEMPORARY_REDIRECT, LOGIN_PATH, title)

    if path in GENERAL_ROUTES and user.role.is_maintenance:
        return RouteDecision(path, False, status.HTTP_307_TEMPORARY_REDIRECT, MAINTENANCE_PATH, title)

    if maintenance_title is not None and not user.role.is_maintenance:
        return RouteDecision(path, False, status.HTTP_307_TEMPORARY_REDIRECT, DASHBOARD_PATH, title)

    return RouteDecision(path, True, status.HTTP_200_OK, title=title)
