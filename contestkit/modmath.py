"""Modular arithmetic helpers with results kept in the range [0, mod)."""

MOD = 10**9 + 7


def _check_modulus(mod: int) -> None:
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")


def add(a: int, b: int, mod: int = MOD) -> int:
    """Return (a + b) reduced modulo ``mod``; operands are expected in [0, mod)."""
    _check_modulus(mod)
    total = a + b
    if total >= mod:
        total -= mod
    return total


def sub(a: int, b: int, mod: int = MOD) -> int:
    """Return (a - b) reduced modulo ``mod``; operands are expected in [0, mod)."""
    _check_modulus(mod)
    diff = a - b
    if diff < 0:
        diff += mod
    return diff


def mul(a: int, b: int, mod: int = MOD) -> int:
    """Return a * b modulo ``mod``, never negative."""
    _check_modulus(mod)
    return (a % mod) * (b % mod) % mod


def power(a: int, p: int, mod: int = MOD) -> int:
    """Return a ** p modulo ``mod`` for a non-negative exponent."""
    _check_modulus(mod)
    if p < 0:
        raise ValueError(f"exponent must be non-negative, got {p}")
    if p == 0:
        return 1
    return pow(a, p, mod)


def inverse(a: int, p: int) -> int:
    """Return the inverse of ``a`` modulo the prime ``p`` by Fermat's little theorem."""
    if p < 2:
        raise ValueError(f"modulus must be a prime, got {p}")
    if a % p == 0:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return power(a, p - 2, p)