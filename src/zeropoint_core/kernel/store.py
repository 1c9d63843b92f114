"""
src/zeropoint_core/kernel/store.py
Content Store v1.0.
Puente entre la Coordenada (1024 bits) y la Memoria Física de payloads.

Garantías:
- Una coordenada se liga una sola vez: reinsertarla es una colisión (CollisionDetected).
- Coincidencia exacta de los 4 ejes; no existen coincidencias parciales.
- La metadata se lee sin tocar el payload.
"""
from typing import Any, Dict, NamedTuple

from .coordinate import Coordinate
from .sectors import SectorMap, DEFAULT_SECTOR_COUNT, DEFAULT_PAGE_SIZE
from ..errors import CoordinateNotFound, CollisionDetected
from ..hashing.kernel import HashKernel
from ..logs import get_logger
from ..memory.allocator import BlobArena

logger = get_logger(__name__)


class Metadata(NamedTuple):
    """Metadata inmutable de un registro."""
    data_length: int
    data_hash: str
    timestamp: int
    coordinate: Coordinate

    def as_dict(self) -> Dict[str, Any]:
        """Forma externa del registro."""
        return {
            "dataLength": self.data_length,
            "dataHash": self.data_hash,
            "timestamp": self.timestamp,
            "coordinate": self.coordinate,
        }


class StoredRecord(NamedTuple):
    coordinate: Coordinate
    slot: int
    metadata: Metadata


class ContentStore:
    """
    Mapa Coordinate -> StoredRecord con vida de proceso.
    Instanciable e inyectable: cada store es independiente.
    """

    def __init__(self, sector_count: int = DEFAULT_SECTOR_COUNT, page_size: int = DEFAULT_PAGE_SIZE):
        self._sectors = SectorMap(sector_count)
        self._arena = BlobArena(name="payloads", page_size=page_size)

    # =========================================================================
    # ESCRITURA
    # =========================================================================
    def put(self, coordinate: Coordinate, payload: bytes, metadata: Metadata) -> StoredRecord:
        """
        Inserta un registro nuevo. Todo o nada: ante colisión el store queda intacto.
        """
        # El store guarda su propia copia inmutable
        payload = bytes(payload)
        digest = HashKernel.digest(payload)
        self._validate(coordinate, payload, digest, metadata)
        sector = self._sectors.sector_for(coordinate)

        # 1. Chequeo Optimista
        if coordinate in sector.records:
            self._collision(coordinate)

        # 2. Materialización (Zona Crítica)
        with sector.lock:
            if coordinate in sector.records:
                self._collision(coordinate)
            slot = self._arena.store(payload, digest)
            record = StoredRecord(coordinate, slot, metadata)
            sector.records[coordinate] = record
            return record

    @staticmethod
    def _validate(coordinate: Coordinate, payload: bytes, digest: bytes, metadata: Metadata):
        """La metadata debe describir exactamente este payload en esta coordenada."""
        if metadata.coordinate != coordinate:
            raise ValueError("CRITICAL: La metadata pertenece a otra coordenada.")
        if metadata.data_length != len(payload):
            raise ValueError(
                f"CRITICAL: data_length {metadata.data_length} != {len(payload)} bytes del payload."
            )
        if metadata.data_hash != digest.hex():
            raise ValueError(f"CRITICAL: data_hash no coincide con el payload ({digest.hex()[:16]}...).")

    @staticmethod
    def _collision(coordinate: Coordinate):
        logger.error("coordinate_collision", key=coordinate.to_key())
        raise CollisionDetected(f"CRITICAL: Coordenada ya ligada: {coordinate.to_key()[:32]}...", coordinate)

    # =========================================================================
    # LECTURA
    # =========================================================================
    def get(self, coordinate: Coordinate) -> bytes:
        record = self._record(coordinate)
        return self._arena.get(record.slot)

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate in self._sectors.sector_for(coordinate).records

    def metadata_of(self, coordinate: Coordinate) -> Metadata:
        return self._record(coordinate).metadata

    def _record(self, coordinate: Coordinate) -> StoredRecord:
        record = self._sectors.sector_for(coordinate).records.get(coordinate)
        if record is None:
            logger.debug("coordinate_not_found", key=coordinate.to_key()[:32])
            raise CoordinateNotFound(coordinate)
        return record

    # =========================================================================
    # INTROSPECCIÓN
    # =========================================================================
    def __contains__(self, coordinate: Coordinate) -> bool:
        return self.contains(coordinate)

    def __len__(self) -> int:
        return sum(self._sectors.stats())

    def stats(self) -> Dict[str, Any]:
        return {
            "records": len(self),
            "sectors": self._sectors.stats(),
            "arena": self._arena.stats(),
        }
