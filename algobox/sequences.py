"""Fibonacci-like counting sequences taken modulo a large prime."""

MODULUS = 1_000_000_007


def fibonacci_mod(n: int) -> int:
    """The (n + 1)-th Fibonacci number modulo MODULUS; 0 when n <= 0."""
    result = 0
    previous, before = 1, 0
    for _ in range(n):
        result = (before + previous) % MODULUS
        before, previous = previous, result
    return result


def staircase_ways(n: int, k: int) -> int:
    """Ways to climb from step 1 to step n jumping 1..k steps, modulo MODULUS.

    Raises ValueError when n < 1.
    """
    if n < 1:
        raise ValueError("the staircase needs at least one step")
    ways = [0, 1]
    reach = max(k, 0)
    for step in range(2, n + 1):
        ways.append(sum(ways[step - min(reach, step):step]) % MODULUS)
    return ways[n]