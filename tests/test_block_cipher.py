import logging
from concurrent.futures import ThreadPoolExecutor
from unittest import TestCase

from sdes.bitops import int_to_bits
from sdes.cipher_core import SdesCipher, decrypt_block, encrypt_block
from sdes.cipher_core.block_cipher import IP, IP_INV
from sdes.codec import from_binary_string, to_binary_string
from sdes.exceptions import InvalidBlockLength, InvalidKeyLength
from sdes.key_schedule import derive_subkeys


def bits(text):
    return from_binary_string(text)


class TestBlockCipher(TestCase):
    def test_encrypt_known_answer(self):
        keys = derive_subkeys(bits("1010000010"))
        actual = encrypt_block(bits("11010100"), keys)
        self.assertEqual("10100100", to_binary_string(actual))

    def test_decrypt_known_answer(self):
        keys = derive_subkeys(bits("1010000010"))
        actual = decrypt_block(bits("10100100"), keys)
        self.assertEqual("11010100", to_binary_string(actual))

    def test_encrypt_other_vectors(self):
        cases = [
            ("0000000000", "00000000", "11110000"),
            ("1111111111", "11111111", "00001111"),
            ("1010000010", "01110010", "00111010"),
        ]
        for key, plaintext, ciphertext in cases:
            keys = derive_subkeys(bits(key))
            self.assertEqual(ciphertext, to_binary_string(encrypt_block(bits(plaintext), keys)))

    def test_round_trip_every_key_and_block(self):
        blocks = [int_to_bits(value, 8) for value in range(256)]
        for key_value in range(1024):
            cipher = SdesCipher.from_key(int_to_bits(key_value, 10))
            for block in blocks:
                self.assertEqual(block, cipher.decrypt(cipher.encrypt(block)))

    def test_encryption_is_a_permutation_of_blocks(self):
        keys = derive_subkeys(bits("0110011001"))
        outputs = {encrypt_block(int_to_bits(value, 8), keys) for value in range(256)}
        self.assertEqual(256, len(outputs))

    def test_encrypt_is_deterministic(self):
        keys = derive_subkeys(bits("1010000010"))
        block = bits("11010100")
        self.assertEqual(encrypt_block(block, keys), encrypt_block(block, keys))

    def test_rejects_bad_block_length(self):
        keys = derive_subkeys(bits("1010000010"))
        for length in (0, 4, 7, 9, 16):
            with self.assertRaises(InvalidBlockLength):
                encrypt_block((1,) * length, keys)
            with self.assertRaises(InvalidBlockLength):
                decrypt_block((1,) * length, keys)

    def test_initial_permutations_are_inverse(self):
        self.assertEqual(sorted(IP), list(range(1, 9)))
        block = bits("10110001")
        permuted = tuple(block[i - 1] for i in IP)
        self.assertEqual(block, tuple(permuted[i - 1] for i in IP_INV))


class TestSdesCipher(TestCase):
    def test_from_key_matches_functions(self):
        cipher = SdesCipher.from_key(bits("1010000010"))
        self.assertEqual(derive_subkeys(bits("1010000010")), cipher.subkeys)
        self.assertEqual(bits("10100100"), cipher.encrypt(bits("11010100")))
        self.assertEqual(bits("11010100"), cipher.decrypt(bits("10100100")))

    def test_from_key_rejects_bad_key(self):
        with self.assertRaises(InvalidKeyLength):
            SdesCipher.from_key(bits("10100000101"))
        with self.assertRaises(InvalidKeyLength):
            SdesCipher.from_key(())

    def test_cipher_is_immutable(self):
        cipher = SdesCipher.from_key(bits("1010000010"))
        with self.assertRaises(AttributeError):
            cipher.subkeys = derive_subkeys(bits("0000000000"))

    def test_shared_between_threads(self):
        cipher = SdesCipher.from_key(bits("1010000010"))
        blocks = [int_to_bits(value, 8) for value in range(256)]
        expected = [cipher.encrypt(block) for block in blocks]
        with ThreadPoolExecutor(max_workers=4) as executor:
            actual = list(executor.map(cipher.encrypt, blocks))
        self.assertEqual(expected, actual)

    def test_from_key_does_not_log_key_material(self):
        records = []
        handler = logging.Handler(logging.DEBUG)
        handler.emit = records.append
        sdes_logger = logging.getLogger("sdes")
        previous_level = sdes_logger.level
        sdes_logger.addHandler(handler)
        sdes_logger.setLevel(logging.DEBUG)
        try:
            cipher = SdesCipher.from_key(bits("1010000010"))
            cipher.encrypt(bits("11010100"))
        finally:
            sdes_logger.removeHandler(handler)
            sdes_logger.setLevel(previous_level)
        messages = [record.getMessage() for record in records]
        for subkey in ("10100100", "01000011"):
            self.assertFalse([message for message in messages if subkey in message])
