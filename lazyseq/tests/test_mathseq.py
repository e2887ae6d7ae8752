# -*- coding: utf-8 -*-

import pytest

from lazyseq import mathseq
from lazyseq.it import take, to_list, nth
from lazyseq.lseq import memoize
from lazyseq.mathseq import nats, fibonacci, primes, isprime, prime_at

def test_nats():
    assert to_list(take(5, nats())) == [0, 1, 2, 3, 4]
    assert to_list(take(3, nats(10))) == [10, 11, 12]
    assert to_list(take(3, nats(-1))) == [-1, 0, 1]
    assert str(nats().label) == "nats"
    with pytest.raises(TypeError):
        nats(1.5)
    with pytest.raises(TypeError):
        nats(True)

def test_fibonacci():
    assert to_list(take(6, fibonacci())) == [0, 1, 1, 2, 3, 5]
    assert nth(30, fibonacci()) == 832040
    assert str(fibonacci().label) == "fibonacci"

def test_isprime():
    assert [n for n in range(30) if isprime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert not isprime(-7)
    assert not isprime(1)
    assert isprime(7919)
    assert not isprime(7917)
    with pytest.raises(TypeError):
        isprime(2.0)
    with pytest.raises(TypeError):
        isprime(True)

def test_primes():
    assert to_list(take(5, primes())) == [2, 3, 5, 7, 11]
    assert to_list(take(10, primes())) == [prime_at(k) for k in range(1, 11)]
    assert nth(999, primes()) == 7919
    assert str(primes().label) == "primes"

def test_prime_at():
    assert prime_at(1) == 2
    assert prime_at(2) == 3
    assert prime_at(100) == 541
    with pytest.raises(ValueError):
        prime_at(0)
    with pytest.raises(TypeError):
        prime_at("1")
    with pytest.raises(TypeError):
        prime_at(True)

def test_primes_are_searched_for_again_on_each_traversal(monkeypatch):
    tested = []
    isprime_orig = mathseq.isprime
    def counting_isprime(n):
        tested.append(n)
        return isprime_orig(n)
    monkeypatch.setattr(mathseq, "isprime", counting_isprime)

    ps = primes()
    assert to_list(take(5, ps)) == [2, 3, 5, 7, 11]
    first_pass = len(tested)
    assert first_pass > 0
    # Only the first prime is held by `ps` itself; the rest are found again.
    assert to_list(take(5, ps)) == [2, 3, 5, 7, 11]
    assert len(tested) == 2 * first_pass - 1

    # Opt in to sharing, and the second traversal is free.
    ps = memoize(primes())
    assert to_list(take(5, ps)) == [2, 3, 5, 7, 11]
    n = len(tested)
    assert to_list(take(5, ps)) == [2, 3, 5, 7, 11]
    assert len(tested) == n
