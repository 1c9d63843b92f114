"""
tests/zeropoint_core/hashing/test_hash_kernel.py
Tests del Núcleo de Hashing.
Verifica: Digest primario, Energía (masa + entropía) y Firma Topológica.
"""
import hashlib
import unittest

from zeropoint_core.hashing.kernel import HashKernel, ContentProfile

class TestHashKernel(unittest.TestCase):

    # =========================================================================
    # 1. DIGEST PRIMARIO
    # =========================================================================

    def test_empty_digest_is_sha256_of_empty_string(self):
        """El payload vacío tiene un digest bien definido."""
        profile = HashKernel.profile(b"")
        self.assertEqual(profile.hex_digest, hashlib.sha256(b"").hexdigest())
        self.assertEqual(profile.length, 0)
        self.assertEqual(profile.energy, 0)
        self.assertEqual(profile.entropy, 0.0)

    def test_digest_matches_sha256(self):
        data = b"Hello, Universe!"
        self.assertEqual(HashKernel.digest(data), hashlib.sha256(data).digest())
        self.assertEqual(len(HashKernel.profile(data).hex_digest), 64)

    def test_profile_is_deterministic(self):
        data = bytes(range(256)) * 3
        self.assertEqual(HashKernel.profile(data), HashKernel.profile(data))
        self.assertIsInstance(HashKernel.profile(data), ContentProfile)

    # =========================================================================
    # 2. ENERGÍA
    # =========================================================================

    def test_energy_is_byte_mass(self):
        self.assertEqual(HashKernel.profile(bytes([0] * 100)).energy, 0)
        self.assertEqual(HashKernel.profile(bytes([255] * 100)).energy, 25500)
        self.assertEqual(HashKernel.profile(bytes([128] * 100)).energy, 12800)

    def test_entropy_bounds(self):
        """Uniforme sobre los 256 valores -> 8 bits. Constante -> 0 bits."""
        self.assertAlmostEqual(HashKernel.profile(bytes(range(256))).entropy, 8.0)
        self.assertEqual(HashKernel.profile(b"\x07" * 64).entropy, 0.0)
        self.assertAlmostEqual(HashKernel.profile(b"\x00\x01" * 32).entropy, 1.0)

    # =========================================================================
    # 3. TOPOLOGÍA
    # =========================================================================

    def test_topology_is_order_sensitive(self):
        """Mismo multiconjunto de bytes, distinto orden -> distinta firma."""
        increasing = bytes(range(48))
        decreasing = bytes(reversed(range(48)))
        shuffled = bytes(range(0, 48, 2)) + bytes(range(1, 48, 2))

        signatures = {
            HashKernel.profile(increasing).topology,
            HashKernel.profile(decreasing).topology,
            HashKernel.profile(shuffled).topology,
        }
        self.assertEqual(len(signatures), 3)

    def test_topology_fits_64_bits(self):
        for data in (b"", b"\x00", bytes(range(256)) * 4):
            topology = HashKernel.profile(data).topology
            self.assertGreaterEqual(topology, 0)
            self.assertLess(topology, 1 << 64)

if __name__ == '__main__':
    unittest.main()
