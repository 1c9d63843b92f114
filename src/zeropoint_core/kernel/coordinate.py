"""
src/zeropoint_core/kernel/coordinate.py
Coordenada Zero-Point v1.0.
Handle inmutable de 1024 bits (4 ejes x 256 bits).
Como un GPS: el mismo tamaño sin importar a qué apunte.
"""
from typing import Any, Iterator, Tuple

from ..hashing.invariants import (
    Axis, AXIS_COUNT, BYTES_AXIS, COORD_BYTES, MASK_64, MASK_256,
    SHIFT_EPOCH, SHIFT_SEQUENCE,
)
from ..hashing.utils import holographic_hash


class Coordinate:
    """
    Valor inmutable (x, y, z, t).
    Igualdad componente a componente; hashable (sirve como clave de dict).
    """
    __slots__ = ('x', 'y', 'z', 't')

    def __init__(self, x: int, y: int, z: int, t: int):
        for name, value in zip('xyzt', (x, y, z, t)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Componente '{name}' debe ser int, no {type(value).__name__}")
            if value < 0 or value > MASK_256:
                raise ValueError(f"Componente '{name}' fuera de [0, 2^256)")
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Coordinate es inmutable")

    def __delattr__(self, name):
        raise AttributeError("Coordinate es inmutable")

    # --- Constructores Estáticos ---
    @staticmethod
    def of(obj: Any) -> 'Coordinate':
        """Acepta una Coordinate o cualquier secuencia (x, y, z, t)."""
        if isinstance(obj, Coordinate):
            return obj
        try:
            x, y, z, t = obj
        except (TypeError, ValueError):
            raise TypeError(f"No se puede convertir {type(obj).__name__} a Coordinate") from None
        return Coordinate(x, y, z, t)

    @staticmethod
    def from_key(key: str, base: int = 16) -> 'Coordinate':
        """Inverso de to_key(): 'x-y-z-t' en hexadecimal (o decimal con base=10)."""
        parts = key.split('-')
        if len(parts) != AXIS_COUNT:
            raise ValueError(f"Clave de coordenada malformada: {key!r}")
        return Coordinate(*(int(p, base) for p in parts))

    @staticmethod
    def from_bytes(raw: bytes) -> 'Coordinate':
        """Inverso de to_bytes(): 4 carriles big-endian de 32 bytes."""
        if len(raw) != COORD_BYTES:
            raise ValueError(f"Una coordenada ocupa {COORD_BYTES} bytes, no {len(raw)}")
        lanes = (raw[i:i + BYTES_AXIS] for i in range(0, COORD_BYTES, BYTES_AXIS))
        return Coordinate(*(int.from_bytes(lane, 'big') for lane in lanes))

    # --- Representaciones ---
    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.t)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def component(self, axis: Axis) -> int:
        return self.as_tuple()[Axis(axis)]

    def to_key(self, base: int = 16) -> str:
        if base == 16:
            return '-'.join(format(v, 'x') for v in self)
        if base == 10:
            return '-'.join(str(v) for v in self)
        raise ValueError(f"Base no soportada: {base}")

    def to_bytes(self) -> bytes:
        return b''.join(v.to_bytes(BYTES_AXIS, 'big') for v in self)

    # --- Decodificación Lazy del eje T ---
    @property
    def timestamp(self) -> int:
        """Carril epoch (ms) del eje temporal."""
        return (self.t >> SHIFT_EPOCH) & MASK_64

    @property
    def sequence(self) -> int:
        """Carril discriminador del eje temporal."""
        return (self.t >> SHIFT_SEQUENCE) & MASK_64

    # --- Identidad ---
    def __eq__(self, other):
        if isinstance(other, Coordinate):
            return self.as_tuple() == other.as_tuple()
        return NotImplemented

    def __hash__(self):
        h = 0
        for v in self:
            h = holographic_hash((h << 256) | v)
        return h

    def __repr__(self):
        head = ', '.join(f"{n}={hex(v)[:12]}..." for n, v in zip('xyzt', self))
        return f"<Coordinate {head}>"
