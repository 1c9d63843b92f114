"""
src/zeropoint_core/hashing/encoder.py
Motor Dimensional v1.0.
Proyecta un ContentProfile sobre los 4 ejes de la coordenada:
- X (Espacial):   BLAKE2b personalizado sobre el digest primario.
- Y (Energía):    BLAKE2b salado con la masa de bytes y la entropía.
- Z (Topología):  BLAKE2b salado con la firma de transiciones.
- T (Temporal):   Epoch ms | Secuencia atómica | Pliegue del digest.
X, Y, Z son funciones puras del contenido. T existe para romper empates.
"""
import hashlib
import struct
import threading
import time
from typing import Callable, Optional, Tuple

from .invariants import *
from .kernel import ContentProfile
from .utils import bytes_to_int, holographic_hash, int_to_bytes
from ..kernel.coordinate import Coordinate


def wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class TemporalSequencer:
    """
    Fuente de unicidad compartida y thread-safe.
    Cada tick devuelve (epoch_ms, secuencia); la secuencia nunca se repite.
    """
    __slots__ = ('_clock', '_lock', '_last_ms', '_sequence')

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or wall_clock_ms
        self._lock = threading.Lock()
        self._last_ms = 0
        self._sequence = 0

    def tick(self) -> Tuple[int, int]:
        with self._lock:
            # Epoch no decreciente aunque el reloj de pared retroceda
            now = self._clock()
            if now > self._last_ms:
                self._last_ms = now
            self._sequence = (self._sequence + 1) & MASK_64
            return self._last_ms, self._sequence


class DimensionEncoder:
    """Deriva la coordenada de 1024 bits a partir del perfil de contenido."""
    __slots__ = ('_sequencer',)

    def __init__(self, sequencer: Optional[TemporalSequencer] = None):
        self._sequencer = sequencer or TemporalSequencer()

    def derive(self, profile: ContentProfile) -> Coordinate:
        epoch_ms, sequence = self._sequencer.tick()
        return Coordinate(
            self.spatial(profile),
            self.energy(profile),
            self.topology(profile),
            self.temporal(profile, epoch_ms, sequence),
        )

    # ---------------------------------------------------------
    # EJES DE CONTENIDO (Deterministas)
    # ---------------------------------------------------------
    @staticmethod
    def spatial(profile: ContentProfile) -> int:
        hasher = hashlib.blake2b(digest_size=BYTES_AXIS, person=PERSON_SPATIAL)
        hasher.update(profile.digest)
        hasher.update(struct.pack('<Q', profile.length))
        return bytes_to_int(hasher.digest()) & MASK_256

    @staticmethod
    def energy(profile: ContentProfile) -> int:
        hasher = hashlib.blake2b(digest_size=BYTES_AXIS, person=PERSON_ENERGY)
        hasher.update(profile.digest)
        # La masa crece sin límite con el tamaño: serialización dinámica con prefijo
        mass = int_to_bytes(profile.energy)
        hasher.update(struct.pack('<H', len(mass)))
        hasher.update(mass)
        hasher.update(struct.pack('<d', profile.entropy))
        return bytes_to_int(hasher.digest()) & MASK_256

    @staticmethod
    def topology(profile: ContentProfile) -> int:
        hasher = hashlib.blake2b(digest_size=BYTES_AXIS, person=PERSON_TOPOLOGY)
        hasher.update(profile.digest)
        hasher.update(struct.pack('<QQ', profile.topology, profile.length))
        return bytes_to_int(hasher.digest()) & MASK_256

    # ---------------------------------------------------------
    # EJE TEMPORAL (Unicidad)
    # ---------------------------------------------------------
    @staticmethod
    def temporal(profile: ContentProfile, epoch_ms: int, sequence: int) -> int:
        fold = holographic_hash(bytes_to_int(profile.digest))
        t = (
            ((epoch_ms & MASK_64) << SHIFT_EPOCH) |
            ((sequence & MASK_64) << SHIFT_SEQUENCE) |
            (fold << SHIFT_FOLD)
        )
        return t & MASK_256
