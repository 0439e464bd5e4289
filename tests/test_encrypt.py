import pytest

from bgvtoy.encrypt import Ciphertext, encrypt
from bgvtoy.keys import PublicKey, generate_keys
from bgvtoy.poly import Polynomial


def test_encrypt():
    pk, _sk = generate_keys()
    plaintext = Polynomial.from_u64([1, 2, 3, 4], pk.modulus)
    ciphertext = encrypt(plaintext, pk)
    assert len(ciphertext.c0.coefficients) == len(plaintext.coefficients)
    assert len(ciphertext.c1.coefficients) == len(plaintext.coefficients)


def test_coefficients_in_range():
    pk, _ = generate_keys()
    ct = encrypt(Polynomial.from_u64([1, 0, 0, 0], pk.modulus), pk)
    assert all(0 <= c < 97 for c in ct.c0.coefficients + ct.c1.coefficients)


def test_zero_key_leaves_plaintext_exposed():
    zero = Polynomial.zero(4, 97)
    pk = PublicKey(zero, zero, 97)
    m = Polynomial([5, 6, 7, 8], 97)
    assert encrypt(m, pk) == Ciphertext(m, zero)


def test_short_plaintext_rejected():
    pk, _ = generate_keys()
    with pytest.raises(ValueError):
        encrypt(Polynomial.from_u64([1], pk.modulus), pk)