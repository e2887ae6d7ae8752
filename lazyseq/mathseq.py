# -*- coding: utf-8 -*-
"""Mathematical sequences: natural numbers, Fibonacci numbers, primes.

All three are infinite, and each is an ``unfold`` of a seed state and a step
rule. Nothing is computed until observed.

The prime stream is deliberately naive: each element is found by scanning
upward from the previous prime, testing each candidate with trial division.
Nothing is cached across positions (not even between traversals of the same
sequence value), so each element costs roughly its own magnitude to find.
If you need many primes many times, ``memoize`` the sequence.
"""

__all__ = ["nats", "fibonacci", "primes", "isprime", "prime_at"]

from .fold import unfold, unfold1

def nats(start=0):
    """Return the natural numbers start, start + 1, start + 2, ..."""
    if isinstance(start, bool) or not isinstance(start, int):
        raise TypeError(f"expected integer start, got {type(start)} with value {start}")
    def step(n):
        return n, n + 1
    return unfold1(step, start, label="nats")

def fibonacci():
    """Return the Fibonacci numbers 0, 1, 1, 2, 3, 5, 8, ..."""
    def step(a, b):
        return a, b, a + b
    return unfold(step, 0, 1, label="fibonacci")

def isprime(n):
    """Return whether the integer ``n`` is prime, by trial division."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected integer n, got {type(n)} with value {n}")
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True

def _nextprime(n):  # smallest prime >= n
    while not isprime(n):
        n += 1
    return n

def primes():
    """Return the prime numbers 2, 3, 5, 7, 11, ... as a lazy sequence."""
    def step(candidate):
        p = _nextprime(candidate)
        return p, p + 1
    return unfold1(step, 2, label="primes")

def prime_at(k):
    """Return the ``k``th prime, counting from 1 (``prime_at(1) == 2``).

    Scans upward from 2 on every call.
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"expected integer k, got {type(k)} with value {k}")
    if k < 1:
        raise ValueError(f"expected k >= 1, got {k}")
    p = 1
    for _ in range(k):
        p = _nextprime(p + 1)
    return p
