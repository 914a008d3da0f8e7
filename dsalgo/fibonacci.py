"""Several ways of computing Fibonacci numbers."""

from __future__ import annotations

MOD = 1_000_000_007

_memo = [0, 1, 1]


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_recursive(n: int) -> int:
    """Plain recursion; every n below 3 gives 1."""
    _check(n)
    if n < 3:
        return 1
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_memo(n: int) -> int:
    """Fibonacci number using a shared cache of earlier results."""
    _check(n)
    while len(_memo) <= n:
        _memo.append(_memo[-1] + _memo[-2])
    return _memo[n]


def fibonacci_dp(n: int) -> int:
    """Fibonacci number from a bottom-up table."""
    _check(n)
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


def fibonacci_iterative(n: int) -> int:
    """Fibonacci number keeping only the last two values."""
    _check(n)
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def matrix_power(n: int) -> tuple[int, int, int, int]:
    """Return [[1, 1], [1, 0]] to the n-th power, flattened, modulo MOD."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return (1, 1, 1, 0)
    if n == 2:
        return (2, 1, 1, 1)
    a, b, c, d = matrix_power(n // 2)
    square = (
        (a * a + b * c) % MOD,
        (a * b + b * d) % MOD,
        (c * a + d * c) % MOD,
        (c * b + d * d) % MOD,
    )
    if n % 2 == 0:
        return square
    s0, _, s2, _ = square
    s1, s3 = square[1], square[3]
    return ((s0 + s1) % MOD, s0, (s2 + s3) % MOD, s2)


def fibonacci_matrix(n: int) -> int:
    """Fibonacci number modulo MOD by matrix exponentiation; n below 3 gives 1."""
    _check(n)
    if n < 3:
        return 1
    return matrix_power(n - 1)[0]