"""
Endpoints de navegação.

Menu lateral e decisão do guarda de rotas para as páginas do console.
"""

from fastapi import APIRouter, Query, Request

from bess_console.core.config import settings
from bess_console.core.dependencies import CurrentUser
from bess_console.core.session import resolve_route
from bess_console.schemas.base import APIResponse
from bess_console.schemas.navigation import MenuItem, RouteDecisionResponse

router = APIRouter(prefix="/navegacao", tags=["Navegação"])

# Mesmo menu para todos os papéis; o guarda redireciona o que não couber
MENU_ITEMS = (
    MenuItem(name="Clientes", path="/clientes"),
    MenuItem(name="Administradores", path="/administradores"),
    MenuItem(name="BESS", path="/bess"),
    MenuItem(name="Manutenções", path="/manutencoes"),
    MenuItem(name="Perfil", path="/perfil"),
)


@router.get("/menu", response_model=APIResponse[list[MenuItem]])
async def get_menu(current_user: CurrentUser) -> APIResponse[list[MenuItem]]:
    """Itens do menu lateral."""
    return APIResponse(success=True, data=list(MENU_ITEMS))


@router.get("/resolve", response_model=APIResponse[RouteDecisionResponse])
async def resolve_page(
    request: Request,
    path: str = Query(..., description="Caminho da página, ex.: /clientes"),
) -> APIResponse[RouteDecisionResponse]:
    """
    Decide se a página pode ser exibida com a sessão atual.

    Não exige sessão: a resposta indica o redirecionamento.
    """
    decision = resolve_route(path, request.cookies.get(settings.SESSION_COOKIE_NAME))
    return APIResponse(
        success=True,
        data=RouteDecisionResponse(
            path=decision.path,
            allowed=decision.allowed,
            status_code=decision.status_code,
            redirect_to=decision.redirect_to,
            title=decision.title,
        ),
        redirect_to=decision.redirect_to,
    )
