"""
Endpoints da API v1.

Módulos disponíveis:
- auth: Login, sessão, recuperação de senha e cadastro de usuários
- bess: Sistemas BESS e dashboard
- clientes: Gestão de clientes
- health: Health check
- manutencoes: Ordens de manutenção
- navegacao: Menu lateral e guarda de rotas
- relatorios: Relatório de manutenção em etapas
- usuarios: Usuários cadastrados
"""
