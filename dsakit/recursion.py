"""Recursion exercises: counting, searching, backtracking and number theory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise, product
from math import isqrt

_DIGIT_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

# Moves in the order they are explored: down, right, up, left.
_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return 1 if n == 0 else n * factorial(n - 1)


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 1:
        raise ValueError("count must start at 1 or above")
    return [n] if n == 1 else [n, *count_down(n - 1)]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking 1 or 2 at a time."""
    if n < 0:
        return 0
    return fibonacci(n + 1)


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether ``values`` is in non-decreasing order."""
    return all(prev <= cur for prev, cur in pairwise(values))


def say_digits(n: int) -> list[str]:
    """Return the English word for each decimal digit of ``n``."""
    if n < 0:
        raise ValueError("number must be non-negative")
    return [_DIGIT_WORDS[int(digit)] for digit in str(n)]


def walk(src: int, dest: int) -> list[int]:
    """Return every step taken walking from ``src`` up to, not including, ``dest``."""
    if src > dest:
        raise ValueError("cannot walk backwards")
    return list(range(src, dest))


def contains(values: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in ``values``, checking from the front."""
    if not values:
        return False
    return values[0] == target or contains(values[1:], target)


def recursive_sum(values: Sequence[int]) -> int:
    """Return the sum of ``values``, adding the head to the sum of the tail."""
    if not values:
        return 0
    return values[0] + recursive_sum(values[1:])


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    if len(text) < 2:
        return True
    return text[0] == text[-1] and is_palindrome(text[1:-1])


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    return half * half if exponent % 2 == 0 else base * half * half


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    chars = list(text)
    start, end = 0, len(chars) - 1
    while start < end:
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1
    return "".join(chars)


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return every subset of ``nums``, exploring exclusion before inclusion."""
    items = list(nums)

    def build(index: int, chosen: tuple[int, ...]):
        if index >= len(items):
            yield list(chosen)
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, (*chosen, items[index]))

    return list(build(0, ()))


def subsequences(text: str) -> list[str]:
    """Return every non-empty subsequence of ``text``, exclusion first."""

    def build(index: int, chosen: str):
        if index >= len(text):
            if chosen:
                yield chosen
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, chosen + text[index])

    return list(build(0, ""))


def letter_combinations(digits: str) -> list[str]:
    """Return every string the phone-keypad ``digits`` can spell."""
    if not digits:
        return []
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError("digits must be decimal digits")
    return ["".join(letters) for letters in product(*(_KEYPAD[int(ch)] for ch in digits))]


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by swapping in place."""
    items = list(nums)
    result: list[list[int]] = []

    def solve(index: int) -> None:
        if index >= len(items):
            result.append(list(items))
            return
        for j in range(index, len(items)):
            items[index], items[j] = items[j], items[index]
            solve(index + 1)
            items[index], items[j] = items[j], items[index]

    solve(0)
    return result


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of D/R/U/L moves from the top-left to the bottom-right
    of a square maze, moving only through cells that hold 1."""
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    visited = [[False] * n for _ in range(n)]
    paths: list[str] = []

    def open_cell(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < n and not visited[x][y] and maze[x][y] == 1

    def solve(x: int, y: int, path: str) -> None:
        if not open_cell(x, y):
            return
        if x == n - 1 and y == n - 1:
            paths.append(path)
            return
        visited[x][y] = True
        for letter, dx, dy in _MOVES:
            solve(x + dx, y + dy, path + letter)
        visited[x][y] = False

    solve(0, 0, "")
    return paths


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("gcd needs non-negative numbers")
    while b:
        a, b = b, a % b
    return a


def segmented_sieve(low: int, high: int) -> list[int]:
    """Return the primes in the inclusive range ``low``..``high``."""
    low = max(low, 2)
    if high < low:
        return []
    limit = isqrt(high)
    base = [True] * (limit + 1)
    small_primes = []
    for i in range(2, limit + 1):
        if base[i]:
            small_primes.append(i)
            for j in range(i * i, limit + 1, i):
                base[j] = False
    marks = [True] * (high - low + 1)
    for prime in small_primes:
        first = max(prime * prime, -(-low // prime) * prime)
        for multiple in range(first, high + 1, prime):
            marks[multiple - low] = False
    return [low + offset for offset, is_prime in enumerate(marks) if is_prime]


def to_lower(ch: str) -> str:
    """Return an ASCII capital letter in lower case; other characters unchanged."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if "A" <= ch <= "Z":
        return chr(ord(ch) - ord("A") + ord("a"))
    return ch