"""
src/zeropoint_core/hashing/kernel.py
Núcleo de Hashing v1.0.
Calcula el digest primario (SHA-256) y los rasgos estadísticos del contenido:
- Energía: masa total de bytes + entropía de Shannon del histograma.
- Topología: firma de 64 bits de las transiciones byte a byte (sensible al orden).
Función pura, sin estado.
"""
import hashlib
import math
from typing import NamedTuple

from .invariants import MASK_64, DIGEST_ALGORITHM
from .utils import PRIME_1, PRIME_2

# Vector base del acumulador topológico (Golden Ratio expansion)
BASIS_TOPOLOGY = 0x9e3779b97f4a7c15


class ContentProfile(NamedTuple):
    """Huella inmutable de un payload."""
    digest: bytes
    length: int
    energy: int
    entropy: float
    topology: int

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()


class HashKernel:
    __slots__ = ()

    @staticmethod
    def digest(data: bytes) -> bytes:
        """Digest primario de 256 bits. Para b'' coincide con SHA-256 del string vacío."""
        return hashlib.new(DIGEST_ALGORITHM, data).digest()

    @staticmethod
    def profile(data: bytes) -> ContentProfile:
        """
        Perfil completo en una sola pasada sobre los bytes.
        Histograma (energía) y cadena de transiciones (topología) se acumulan juntos.
        """
        counts = [0] * 256
        energy = 0
        topology = BASIS_TOPOLOGY
        prev = 0

        for b in data:
            counts[b] += 1
            energy += b
            # Transición modular: creciente (+1) y decreciente (255) son direcciones distintas
            delta = (b - prev) & 0xFF
            topology = ((topology ^ delta) * PRIME_1) & MASK_64
            prev = b

        # Avalanche final para dispersar acumuladores cortos
        topology ^= topology >> 29
        topology = (topology * PRIME_2) & MASK_64
        topology ^= topology >> 32

        return ContentProfile(
            digest=HashKernel.digest(data),
            length=len(data),
            energy=energy,
            entropy=HashKernel.entropy(counts, len(data)),
            topology=topology,
        )

    @staticmethod
    def entropy(counts: list[int], total: int) -> float:
        """Entropía de Shannon en bits/byte. 0.0 para el payload vacío."""
        if not total:
            return 0.0
        h = 0.0
        for c in counts:
            if c:
                p = c / total
                h -= p * math.log2(p)
        return h
