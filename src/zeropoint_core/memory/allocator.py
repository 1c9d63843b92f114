"""
src/zeropoint_core/memory/allocator.py
Arena de Payloads v1.0.
Almacenamiento físico de los bytes, deduplicado por digest y con conteo de referencias.
Varias coordenadas del mismo contenido comparten un único slot.
"""
import threading
from typing import Any, Dict, List, Optional

from ..errors import CollisionDetected
from ..logs import get_logger

logger = get_logger(__name__)


class BlobArena:
    """
    Gestor de memoria física por páginas.
    Solo crece: los registros son terminales (no hay borrado).
    """
    __slots__ = (
        '_data', '_ref_counts', '_by_digest', '_lock',
        '_capacity', '_name', '_active_count', '_page_size', '_bytes_held'
    )

    def __init__(self, name: str = "Unknown", page_size: int = 4096):
        self._name = name
        self._page_size = page_size
        self._lock = threading.RLock()

        # Estructuras Físicas
        self._data: List[Optional[bytes]] = [None] * page_size
        self._ref_counts: List[int] = [0] * page_size
        # Índice de contenido: digest -> slot
        self._by_digest: Dict[bytes, int] = {}

        self._capacity = page_size
        self._active_count = 0
        self._bytes_held = 0

    def store(self, payload: bytes, digest: bytes) -> int:
        """
        Retorna el slot del payload, reutilizándolo si el contenido ya existe.
        Cada llamada suma una referencia.
        """
        with self._lock:
            idx = self._by_digest.get(digest)
            if idx is not None:
                if self._data[idx] != payload:
                    logger.error("payload_digest_collision", arena=self._name, digest=digest.hex())
                    raise CollisionDetected(f"CRITICAL: Arena '{self._name}': digest {digest.hex()} ya ligado a otro contenido.")
                self._ref_counts[idx] += 1
                return idx

            if self._active_count >= self._capacity:
                self._expand_memory()

            idx = self._active_count
            self._data[idx] = payload
            self._ref_counts[idx] = 1
            self._by_digest[digest] = idx
            self._active_count += 1
            self._bytes_held += len(payload)
            return idx

    def get(self, idx: int) -> bytes:
        """Lectura sin bloqueo (Optimistic Read). Un slot inexistente es un error."""
        return self._data[self._check(idx)]

    def refs(self, idx: int) -> int:
        return self._ref_counts[self._check(idx)]

    def _check(self, idx: int) -> int:
        if not 0 <= idx < self._active_count:
            raise IndexError(f"CRITICAL: Arena '{self._name}': slot {idx} no asignado.")
        return idx

    def _expand_memory(self):
        """Crecimiento elástico: duplicar capacidad o añadir una página (lo que sea mayor)."""
        growth = max(self._capacity, self._page_size)
        self._data.extend([None] * growth)
        self._ref_counts.extend([0] * growth)
        self._capacity += growth

    def stats(self) -> Dict[str, Any]:
        """Introspección para monitoreo de salud."""
        with self._lock:
            return {
                "name": self._name,
                "capacity": self._capacity,
                "active": self._active_count,
                "references": sum(self._ref_counts[:self._active_count]),
                "bytes": self._bytes_held,
            }
