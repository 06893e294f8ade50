"""
Dados de exemplo carregados no store ao iniciar.
"""

from datetime import datetime

from bess_console.models.bess import BESSSystem
from bess_console.models.client import Client, DocumentType
from bess_console.models.maintenance import MaintenanceOrder, Technician


def sample_clients() -> list[Client]:
    return [
        Client("1", "João Silva", DocumentType.CPF, "123.456.789-00"),
        Client("2", "Empresa ABC Ltda", DocumentType.CNPJ, "12.345.678/0001-90"),
        Client("3", "Maria Souza", DocumentType.CPF, "987.654.321-00"),
        Client("4", "Tech Solutions S.A.", DocumentType.CNPJ, "98.765.432/0001-10"),
    ]


def sample_bess_systems() -> list[BESSSystem]:
    return [
        BESSSystem("bess1", "Enel X", "EX-100", "EX10001", 100),
        BESSSystem("bess2", "Enphase", "IQ Battery 10T", "EN10T02", 10.5),
        BESSSystem("bess3", "Tesla", "Powerwall 2", "TL10021", 14),
        BESSSystem("bess4", "LG", "ESS Home 10", "LG20045", 10),
        BESSSystem("bess5", "Sonnen", "eco 12", "SN30067", 12),
    ]


def sample_technicians() -> list[Technician]:
    return [
        Technician("tech1", "Carlos Silva"),
        Technician("tech2", "Ana Oliveira"),
        Technician("tech3", "Roberto Almeida"),
        Technician("tech4", "Patricia Costa"),
        Technician("tech5", "Fernando Santos"),
    ]


def sample_maintenance_orders() -> list[MaintenanceOrder]:
    return [
        MaintenanceOrder("maint1", "bess1", "tech1", datetime(2023, 6, 15)),
        MaintenanceOrder("maint2", "bess2", "tech3", datetime(2023, 7, 22)),
        MaintenanceOrder("maint3", "bess4", "tech2", datetime(2023, 8, 10)),
    ]
