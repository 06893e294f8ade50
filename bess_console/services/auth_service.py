"""
Service de Autenticação.

Login de demonstração: não há verificação de senha, o papel é derivado
do e-mail e a sessão é o marcador "user" gravado pelo endpoint.
"""

import asyncio

import structlog

from bess_console.core.config import settings
from bess_console.core.session import SessionUser, home_for_role, role_for_email

logger = structlog.get_logger()


class AuthService:
    """
    Service de autenticação.

    Simula a latência do servidor antes de responder.
    """

    async def login(self, email: str, password: str) -> tuple[SessionUser, str]:
        """
        Cria a sessão e retorna a página inicial do papel.

        A senha só precisa estar preenchida (checado no schema).
        """
        await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)

        user = SessionUser(email=email, role=role_for_email(email))
        redirect_to = home_for_role(user.role)

        logger.info("Login realizado", email=email, role=user.role.value, redirect_to=redirect_to)
        return user, redirect_to

    async def request_password_recovery(self, email: str) -> str:
        """Não revela se o e-mail existe: sempre confirma o envio."""
        await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)

        logger.info("Recuperação de senha solicitada", email=email)
        return f"Enviamos um link para {email}. Verifique sua caixa de entrada."
