"""
src/zeropoint_core/kernel/sectors.py
Topología del Índice de Coordenadas v1.0.
El índice se parte en sectores, cada uno con su propio candado, para que
escrituras en coordenadas distintas no compitan por un único lock global.
"""
import threading
from typing import Dict, List

from .coordinate import Coordinate

# Configuración de rendimiento
DEFAULT_SECTOR_COUNT = 16
DEFAULT_PAGE_SIZE = 4096


class Sector:
    __slots__ = ('lock', 'records')

    def __init__(self):
        # Candado Reentrante por sector
        self.lock = threading.RLock()
        # Coordinate -> StoredRecord
        self.records: Dict[Coordinate, object] = {}


class SectorMap:
    """
    Orquestador del índice.
    Mapea cada coordenada a su sector usando el eje X (uniforme por construcción).
    """
    __slots__ = ('_sectors',)

    def __init__(self, sector_count: int = DEFAULT_SECTOR_COUNT):
        if sector_count < 1:
            raise ValueError("sector_count debe ser >= 1")
        self._sectors: List[Sector] = [Sector() for _ in range(sector_count)]

    def sector_for(self, coordinate: Coordinate) -> Sector:
        return self._sectors[coordinate.x % len(self._sectors)]

    def __iter__(self):
        return iter(self._sectors)

    def __len__(self):
        return len(self._sectors)

    def stats(self):
        """Ocupación por sector."""
        return [len(s.records) for s in self._sectors]
