import random
import string

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

# "abbacddabcabddacdb" with a=0, b=1, c=2, d=3
WORKED = [0, 1, 1, 0, 2, 3, 3, 0, 1, 2, 0, 1, 3, 3, 0, 2, 3, 1]

ENGLISH = [8.2, 1.5, 2.8, 4.3, 12.7, 2.2, 2.0, 6.1, 7.0, 0.2, 0.8, 4.0, 2.4,
           6.7, 7.5, 1.9, 0.1, 6.0, 6.3, 9.1, 2.8, 1.0, 2.4, 0.2, 2.0, 0.1]


def vigenere(length, key, seed=1):
    """English-looking random letters enciphered with `key`."""
    rng = random.Random(seed)
    plain = rng.choices(range(26), weights=ENGLISH, k=length)
    shifts = [ord(k) - ord("A") for k in key]
    return "".join(string.ascii_uppercase[(p + shifts[i % len(shifts)]) % 26]
                   for i, p in enumerate(plain))


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)
