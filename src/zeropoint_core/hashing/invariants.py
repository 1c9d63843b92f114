"""
src/zeropoint_core/hashing/invariants.py
Geometría de la Coordenada Zero-Point (1024 bits).
Define el layout de los 4 ejes y el layout interno del eje temporal.
"""
from enum import IntEnum

# =============================================================================
# LAYOUT DE LA COORDENADA (1024 Bits / 128 Bytes)
# =============================================================================
# [ X: Espacial (256b) | Y: Energía (256b) | Z: Topología (256b) | T: Temporal (256b) ]

class Axis(IntEnum):
    X = 0  # Espacial (Estructura del contenido)
    Y = 1  # Energía (Distribución de bytes)
    Z = 2  # Topología (Transiciones byte a byte)
    T = 3  # Temporal (Unicidad)

BITS_AXIS   = 256
AXIS_COUNT  = len(Axis)
BYTES_AXIS  = BITS_AXIS // 8

COORD_BITS  = BITS_AXIS * AXIS_COUNT   # 1024
COORD_BYTES = BYTES_AXIS * AXIS_COUNT  # 128

# =============================================================================
# LAYOUT DEL EJE T (256 bits)
# =============================================================================
# [ Reservado (64b) | Epoch ms (64b) | Secuencia (64b) | Pliegue de contenido (64b) ]

SHIFT_FOLD     = 0
SHIFT_SEQUENCE = 64
SHIFT_EPOCH    = 128

# Máscaras de Extracción
MASK_64  = 0xFFFFFFFFFFFFFFFF
MASK_256 = (1 << 256) - 1

# =============================================================================
# SEPARACIÓN DE DOMINIOS (Personalización BLAKE2b, máx. 16 bytes)
# =============================================================================
PERSON_SPATIAL  = b"zp-spatial"
PERSON_ENERGY   = b"zp-energy"
PERSON_TOPOLOGY = b"zp-topology"

# Digest primario (metadata.data_hash)
DIGEST_ALGORITHM = "sha256"
DIGEST_HEX_LENGTH = 64
