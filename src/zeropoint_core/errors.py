"""
src/zeropoint_core/errors.py
Condiciones de fallo del sistema de direccionamiento.
"""


class CoordinateError(Exception):
    """Base de los errores de direccionamiento."""

    def __init__(self, message: str, coordinate=None):
        super().__init__(message)
        self.coordinate = coordinate


class CoordinateNotFound(CoordinateError, KeyError):
    """
    La coordenada no tiene registro en este store.
    Condición normal y recuperable: quien sondea coordenadas desconocidas la recibe.
    """

    def __init__(self, coordinate=None):
        key = coordinate.to_key()[:32] if coordinate is not None else '?'
        super().__init__(f"Coordinate not found: {key}...", coordinate)

    def __str__(self):
        return self.args[0]


class CollisionDetected(CoordinateError, RuntimeError):
    """
    Fallo de corrección: una coordenada ya ligada a un payload vuelve a insertarse.
    Nunca debe silenciarse.
    """
