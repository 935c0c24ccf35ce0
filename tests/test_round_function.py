from unittest import TestCase

from sdes.cipher_core import S0, S1, apply_round_function, feistel_round, sbox_lookup
from sdes.cipher_core.round_function import P4
from sdes.codec import from_binary_string, to_binary_string
from sdes.exceptions import InvalidBlockLength, InvalidKeyLength


def bits(text):
    return from_binary_string(text)


class TestRoundFunction(TestCase):
    def test_sbox_lookup_uses_outer_and_inner_bits(self):
        # 1011: row = bits 0,3 = 11, column = bits 1,2 = 01
        self.assertEqual("01", to_binary_string(sbox_lookup(bits("1011"), S0)))
        # 0110: row 00, column 11
        self.assertEqual("11", to_binary_string(sbox_lookup(bits("0110"), S1)))
        # 1000: row 10, column 00
        self.assertEqual("00", to_binary_string(sbox_lookup(bits("1000"), S0)))
        self.assertEqual("11", to_binary_string(sbox_lookup(bits("1000"), S1)))

    def test_apply_round_function(self):
        self.assertEqual("1010", to_binary_string(apply_round_function(bits("0101"), bits("10100100"))))
        self.assertEqual("1000", to_binary_string(apply_round_function(bits("0000"), bits("00000000"))))

    def test_feistel_round_keeps_right_half(self):
        block = bits("11000101")
        result = feistel_round(block, bits("10100100"))
        self.assertEqual(block[4:], result[4:])
        # Left half is 1100 XOR F(0101) = 1100 XOR 1010
        self.assertEqual("0110", to_binary_string(result[:4]))

    def test_feistel_round_is_an_involution(self):
        block = bits("01101110")
        subkey = bits("01000011")
        self.assertEqual(block, feistel_round(feistel_round(block, subkey), subkey))

    def test_p4_is_a_bijection(self):
        self.assertEqual(sorted(P4), [1, 2, 3, 4])

    def test_rejects_bad_lengths(self):
        with self.assertRaises(InvalidBlockLength):
            apply_round_function(bits("01011"), bits("10100100"))
        with self.assertRaises(InvalidKeyLength):
            apply_round_function(bits("0101"), bits("1010010"))
        with self.assertRaises(InvalidBlockLength):
            feistel_round(bits("0101"), bits("10100100"))
