"""
tests/zeropoint_core/kernel/test_coordinate.py
Tests del Handle Coordinate.
Verifica: Validación de rango, Inmutabilidad, Igualdad/Hash y Representaciones sin pérdida.
"""
import unittest

from zeropoint_core.kernel.coordinate import Coordinate
from zeropoint_core.hashing.invariants import Axis, MASK_256, SHIFT_EPOCH, SHIFT_SEQUENCE

MAX = MASK_256

class TestCoordinateValue(unittest.TestCase):

    # =========================================================================
    # 1. VALIDACIÓN
    # =========================================================================

    def test_range_limits(self):
        Coordinate(0, 0, 0, 0)
        Coordinate(MAX, MAX, MAX, MAX)
        with self.assertRaises(ValueError):
            Coordinate(MAX + 1, 0, 0, 0)
        with self.assertRaises(ValueError):
            Coordinate(0, 0, 0, -1)

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            Coordinate(1.0, 0, 0, 0)
        with self.assertRaises(TypeError):
            Coordinate(True, 0, 0, 0)
        with self.assertRaises(TypeError):
            Coordinate("1", 0, 0, 0)

    def test_immutable(self):
        coord = Coordinate(1, 2, 3, 4)
        with self.assertRaises(AttributeError):
            coord.x = 5
        with self.assertRaises(AttributeError):
            del coord.t
        self.assertEqual(coord.x, 1)

    # =========================================================================
    # 2. IDENTIDAD
    # =========================================================================

    def test_componentwise_equality(self):
        self.assertEqual(Coordinate(1, 2, 3, 4), Coordinate(1, 2, 3, 4))
        self.assertNotEqual(Coordinate(1, 2, 3, 4), Coordinate(1, 2, 3, 5))
        self.assertNotEqual(Coordinate(1, 2, 3, 4), (1, 2, 3, 4))

    def test_usable_as_dict_key(self):
        seen = {Coordinate(1, 2, 3, 4): "a", Coordinate(MAX, 0, 0, 0): "b"}
        self.assertEqual(seen[Coordinate(1, 2, 3, 4)], "a")
        self.assertEqual(len({Coordinate(9, 9, 9, 9), Coordinate(9, 9, 9, 9)}), 1)

    # =========================================================================
    # 3. REPRESENTACIONES
    # =========================================================================

    def test_tuple_and_component(self):
        coord = Coordinate(10, 20, 30, 40)
        self.assertEqual(coord.as_tuple(), (10, 20, 30, 40))
        self.assertEqual(tuple(coord), (10, 20, 30, 40))
        self.assertEqual(coord.component(Axis.Z), 30)
        self.assertEqual(coord.component(Axis.T), 40)

    def test_of_coerces_sequences(self):
        self.assertEqual(Coordinate.of((123, 456, 789, 101112)), Coordinate(123, 456, 789, 101112))
        coord = Coordinate(1, 1, 1, 1)
        self.assertIs(Coordinate.of(coord), coord)
        with self.assertRaises(TypeError):
            Coordinate.of((1, 2, 3))
        with self.assertRaises(TypeError):
            Coordinate.of(None)

    def test_hex_key_round_trip(self):
        coord = Coordinate(MAX, 0, 0xABCDEF, 1 << 200)
        key = coord.to_key()
        self.assertEqual(key.count('-'), 3)
        self.assertEqual(key, key.lower())
        self.assertEqual(Coordinate.from_key(key), coord)

    def test_decimal_key_round_trip(self):
        coord = Coordinate(123, 456, 789, 101112)
        self.assertEqual(coord.to_key(10), "123-456-789-101112")
        self.assertEqual(Coordinate.from_key("123-456-789-101112", 10), coord)

    def test_malformed_key(self):
        with self.assertRaises(ValueError):
            Coordinate.from_key("1-2-3")
        with self.assertRaises(ValueError):
            Coordinate.from_key("1-2-3-zz")
        with self.assertRaises(ValueError):
            Coordinate(1, 2, 3, 4).to_key(8)

    def test_binary_form_is_128_bytes(self):
        coord = Coordinate(1, MAX, 0, 77)
        raw = coord.to_bytes()
        self.assertEqual(len(raw), 128)
        self.assertEqual(Coordinate.from_bytes(raw), coord)
        with self.assertRaises(ValueError):
            Coordinate.from_bytes(raw[:-1])

    def test_temporal_lanes(self):
        t = (1_700_000_000_123 << SHIFT_EPOCH) | (9 << SHIFT_SEQUENCE) | 0xFFFF
        coord = Coordinate(0, 0, 0, t)
        self.assertEqual(coord.timestamp, 1_700_000_000_123)
        self.assertEqual(coord.sequence, 9)

if __name__ == '__main__':
    unittest.main()
