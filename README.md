# bgvtoy

This is a small demonstration of BGV-style homomorphic encryption over
the polynomial ring Z_q[x]/(x^n - 1). It is meant for teaching. The
parameters are fixed and tiny: modulus 97, ring degree 4 and plaintext
modulus 2. It gives no security, so do not use it to protect real data.

## Installation

```
pip install .
```

## Command line

```
bgvtoy --integers 1,2,3
```

The command does the following:

1. It generates a key pair.
2. It encrypts each integer as the constant coefficient of a four-coefficient polynomial.
3. It reads from standard input how many operations to perform. If the answer is not a non-negative integer, it performs one.
4. For each operation it reads `add` or `multiply`. It folds all the ciphertexts together with that operation, decrypts the result and prints the coefficients reduced mod 2.

Anything else typed in place of an operation prints an "Invalid operation" message, and the command moves on to the next operation.

Other behaviour of the options:

- Entries in `--integers` that are not unsigned 64-bit integers are skipped silently.
- If you leave out `--integers`, the command uses `1,2`.
- `--version` prints the version.

## Library use

```python
from bgvtoy.keys import generate_keys
from bgvtoy.poly import Polynomial
from bgvtoy.encrypt import encrypt
from bgvtoy.decrypt import decrypt
from bgvtoy.ops import homomorphic_add, homomorphic_multiply

pk, sk = generate_keys()
m1 = Polynomial.from_u64([1, 0, 0, 0], pk.modulus)
m2 = Polynomial.from_u64([1, 0, 0, 0], pk.modulus)

total = homomorphic_add(encrypt(m1, pk), encrypt(m2, pk))
print(decrypt(total, sk).coefficients)
```

The modules are:

- **`bgvtoy.poly`** provides `Polynomial`, a dataclass that holds `coefficients` and `modulus`.
  - Coefficients are always kept reduced modulo the modulus.
  - It supports `+`, `-` and `*`.
  - Multiplication is cyclic, with indices wrapping around the length of the left operand. It raises `ValueError` if the right operand is shorter.
  - `zero`, `random` and `from_u64` build polynomials.
  - `encode` and `decode` convert to and from lists of unsigned 64-bit integers.
  - `encode_real` and `decode_real` store the magnitude of a real number as a fixed-point constant term.
- **`bgvtoy.keys`** provides the following:
  - `generate_keys()` returns a `PublicKey` and a `SecretKey`, with `b = -a*s + 2*e`.
  - `KeyGenError` is raised if no system randomness is available.
- **`bgvtoy.encrypt`** provides `Ciphertext` (`c0`, `c1`) and `encrypt(plaintext, pk)`.
- **`bgvtoy.decrypt`** provides `decrypt(ct, sk)`, which computes `c0 + c1*s` reduced mod 2.
- **`bgvtoy.ops`** provides `homomorphic_add` and `homomorphic_multiply`.

## What it does not do

- Parameters cannot be chosen. Degree, modulus and plaintext modulus are fixed.
- Multiplication drops the `c1*d1` term. There is no relinearisation, modulus switching or noise management, so repeated operations quickly stop decrypting correctly.
- Keys and ciphertexts are not saved or loaded. Everything lives in memory for one run.

## Tests

```
pip install .[test]
pytest
```