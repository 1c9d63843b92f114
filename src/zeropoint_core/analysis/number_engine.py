"""
src/zeropoint_core/analysis/number_engine.py
Motor de Análisis Numérico (Colaborador externo).
El servicio de direccionamiento lo consume como caja negra: cualquier objeto
con analyze(int) sirve. FieldAnalyzer es la implementación por defecto.
"""
import math
from typing import NamedTuple, Protocol, Tuple

from sympy import isprime

# =============================================================================
# CONSTANTES DE CAMPO
# =============================================================================
# Un campo por cada uno de los 8 bits bajos del entero.
FIELD_CONSTANTS: Tuple[float, ...] = (
    1.0,                  # Identidad
    1.8392867552141612,   # Tribonacci
    1.618033988749895,    # Golden Ratio
    0.5,                  # Mitad
    1 / (2 * math.pi),    # Frecuencia inversa
    2 * math.pi,          # Ciclo completo
    0.19961197478400415,  # Fase
    0.014134725141734695, # Primer cero de zeta (/1000)
)
FIELD_COUNT = len(FIELD_CONSTANTS)

# Tamaño de página del espacio numérico
PAGE_SIZE = 48


class NumberAnalysis(NamedTuple):
    value: int
    fields: Tuple[bool, ...]
    resonance: float
    is_prime: bool
    page: int
    offset: int


class NumberAnalyzer(Protocol):
    def analyze(self, n: int) -> NumberAnalysis: ...


class FieldAnalyzer:
    """
    Descomposición en campos + resonancia + primalidad.
    La primalidad la decide sympy (BPSW, determinista hasta 2^64 y sin
    contraejemplos conocidos por encima).
    """
    __slots__ = ()

    def analyze(self, n: int) -> NumberAnalysis:
        if not isinstance(n, int) or n < 0:
            raise ValueError(f"Se esperaba un entero no negativo, no {n!r}")

        fields = self.fields(n)
        page, offset = divmod(n, PAGE_SIZE)
        return NumberAnalysis(
            value=n,
            fields=fields,
            resonance=self.resonance(fields),
            is_prime=bool(isprime(n)),
            page=page,
            offset=offset,
        )

    @staticmethod
    def fields(n: int) -> Tuple[bool, ...]:
        return tuple(bool((n >> i) & 1) for i in range(FIELD_COUNT))

    @staticmethod
    def resonance(fields: Tuple[bool, ...]) -> float:
        """Producto de las constantes de los campos activos (1.0 si ninguno)."""
        r = 1.0
        for active, alpha in zip(fields, FIELD_CONSTANTS):
            if active:
                r *= alpha
        return r
