"""
src/zeropoint_core/kernel/address.py
Facade de Direccionamiento Zero-Point v1.0.
Coordenadas de tamaño fijo que apuntan a dónde existe un dato.

    service = CoordinateAddressService()
    coord = service.encode(b"Hello, Universe!")
    service.decode(coord)  # -> b"Hello, Universe!"
"""
from typing import Any, NamedTuple, Optional, Union

from .coordinate import Coordinate
from .store import ContentStore, Metadata
from ..analysis.number_engine import FieldAnalyzer, NumberAnalysis, NumberAnalyzer
from ..errors import CoordinateNotFound
from ..logs import get_logger
from ..hashing.encoder import DimensionEncoder
from ..hashing.invariants import Axis, COORD_BITS, COORD_BYTES
from ..hashing.kernel import HashKernel

logger = get_logger(__name__)

Payload = Union[bytes, bytearray, memoryview]


class CoordinateSize(NamedTuple):
    bits: int
    bytes: int


COORDINATE_SIZE = CoordinateSize(bits=COORD_BITS, bytes=COORD_BYTES)


class CoordinateAddressService:
    """
    Fachada pública: compone HashKernel, DimensionEncoder y ContentStore.
    Todos los colaboradores son inyectables (tests con stores independientes).
    """

    def __init__(self,
                 store: Optional[ContentStore] = None,
                 encoder: Optional[DimensionEncoder] = None,
                 analyzer: Optional[NumberAnalyzer] = None):
        self._store = store if store is not None else ContentStore()
        self._encoder = encoder if encoder is not None else DimensionEncoder()
        self._analyzer = analyzer if analyzer is not None else FieldAnalyzer()

    @property
    def store(self) -> ContentStore:
        return self._store

    # =========================================================================
    # ENCODE / DECODE
    # =========================================================================
    def encode(self, data: Payload) -> Coordinate:
        """Codifica cualquier secuencia de bytes (incluida la vacía) a una coordenada fija."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"encode espera bytes, no {type(data).__name__}")
        # Copia independiente: mutar el buffer del llamante no afecta al store
        payload = bytes(data)

        profile = HashKernel.profile(payload)
        coordinate = self._encoder.derive(profile)
        metadata = Metadata(
            data_length=profile.length,
            data_hash=profile.hex_digest,
            timestamp=coordinate.timestamp,
            coordinate=coordinate,
        )
        self._store.put(coordinate, payload, metadata)

        logger.debug("payload_encoded", length=profile.length, key=coordinate.to_key()[:16])
        return coordinate

    def decode(self, coordinate: Any) -> bytes:
        return self._store.get(Coordinate.of(coordinate))

    # =========================================================================
    # CONSULTAS
    # =========================================================================
    def has_coordinate(self, coordinate: Any) -> bool:
        """Función total: lo que no es una coordenada válida tampoco existe."""
        try:
            coordinate = Coordinate.of(coordinate)
        except (TypeError, ValueError):
            return False
        return self._store.contains(coordinate)

    def get_metadata(self, coordinate: Any) -> Optional[Metadata]:
        """Variante no lanzadora: None si la coordenada no existe o no es válida."""
        try:
            return self.require_metadata(coordinate)
        except (CoordinateNotFound, TypeError, ValueError):
            return None

    def require_metadata(self, coordinate: Any) -> Metadata:
        """Variante estricta: CoordinateNotFound si la coordenada no existe."""
        return self._store.metadata_of(Coordinate.of(coordinate))

    @staticmethod
    def get_coordinate_size() -> CoordinateSize:
        """Tamaño fijo del esquema: siempre 1024 bits / 128 bytes."""
        return COORDINATE_SIZE

    def analyze(self, coordinate: Any, axis: Axis = Axis.X) -> NumberAnalysis:
        """Entrega un eje de una coordenada almacenada al motor numérico."""
        coordinate = Coordinate.of(coordinate)
        if not self._store.contains(coordinate):
            raise CoordinateNotFound(coordinate)
        return self._analyzer.analyze(coordinate.component(axis))

    def __len__(self) -> int:
        return len(self._store)
