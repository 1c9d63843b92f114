"""
src/zeropoint_core/hashing/utils.py
Utilidades criptográficas de bajo nivel.
"""
from .invariants import MASK_64

# Constantes de Mezcla (Avalanche Primes)
PRIME_1 = 0xbf58476d1ce4e5b9
PRIME_2 = 0x94d049bb133111eb

def holographic_hash(value: int) -> int:
    """
    Proyección Holográfica de N bits a 64 bits.
    Algoritmo: Avalanche Mixer v5.0, extendido a enteros de cualquier ancho
    (se pliegan todas las capas de 64 bits, no solo las 4 primeras).
    """
    # 1. Extracción y Plegado
    h = value & MASK_64
    layer = value >> 64
    prime = PRIME_1
    while layer:
        h = ((h ^ (layer & MASK_64)) * prime) & MASK_64
        prime = PRIME_2 if prime == PRIME_1 else PRIME_1
        layer >>= 64

    # 2. Avalanche Finalizer
    h ^= (h >> 31)
    h = (h * PRIME_1) & MASK_64
    h ^= (h >> 27)
    h = (h * PRIME_2) & MASK_64
    h ^= (h >> 33)

    return h

def int_to_bytes(value: int, length: int = 0) -> bytes:
    """Serialización big-endian. Con length=0 usa el mínimo de bytes (al menos 1)."""
    nb = length or (value.bit_length() + 7) // 8 or 1
    return value.to_bytes(nb, 'big')

def bytes_to_int(raw: bytes) -> int:
    return int.from_bytes(raw, 'big')
