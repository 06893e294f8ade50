"""
Repository dos sistemas BESS.
"""

from bess_console.core.filtering import filter_records
from bess_console.db.store import MemoryStore
from bess_console.models.bess import BESSSystem
from bess_console.repositories.base import SequentialIdRepository


class BESSRepository(SequentialIdRepository[BESSSystem]):
    """Repository para operações com sistemas BESS."""

    id_prefix = "bess"

    def __init__(self, store: MemoryStore):
        super().__init__(store.bess_systems)

    def get_by_serial_number(self, serial_number: str) -> BESSSystem | None:
        """Busca sistema pelo número de série."""
        return next(
            (s for s in self.records if s.serial_number == serial_number),
            None,
        )

    def search(self, query: str | None = None) -> list[BESSSystem]:
        """Busca por fabricante, modelo ou número de série."""
        return filter_records(
            self.records,
            search=query,
            search_fields=("manufacturer", "model", "serial_number", "label"),
        )
