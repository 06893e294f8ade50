"""
Router principal da API v1.

Agrega todas as rotas organizadas por domínio.
"""

from fastapi import APIRouter

from bess_console.api.v1.endpoints import (
    auth,
    bess,
    clientes,
    health,
    manutencoes,
    navegacao,
    relatorios,
    usuarios,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router, prefix="/health", tags=["Health"])

# Sessão e cadastro
api_router.include_router(auth.router)
api_router.include_router(usuarios.router)

# Navegação
api_router.include_router(navegacao.router)

# Clientes
api_router.include_router(clientes.router)

# Sistemas BESS e dashboard
api_router.include_router(bess.router)

# Ordens e relatórios de manutenção
api_router.include_router(relatorios.router)
api_router.include_router(manutencoes.router)
