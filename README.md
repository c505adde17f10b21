# contest800

Solvers for three short contest problems, each usable as a command that reads
from standard input, plus a small library of number-theory helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads a test count `t` from standard input, followed by `t`
cases. Tokens may be separated by any whitespace. It prints one answer per
line. If the input ends before all `t` cases have been read, the command
raises `ValueError`.

### `contest800-coins`

Each case is `n k`. The answer is `YES` if `n` can be written as a sum of any
number of 2-coins and `k`-coins, and `NO` if it cannot.

```
$ printf '2\n5 3\n5 4\n' | contest800-coins
YES
NO
```

### `contest800-cover-in-water`

Each case is a length `n` followed by a row of cells. `.` is an empty cell
and `#` is a blocked one. The answer is the fewest pours needed to fill every
empty cell. That is 2 if the row contains three empty cells in a row, and
otherwise the number of empty cells. The length token is read but not used.

```
$ printf '2\n3\n...\n5\n.#.#.\n' | contest800-cover-in-water
2
3
```

### `contest800-game-with-integers`

Each case is a single integer `n`. The answer is `Second` when `n` is
divisible by 3, and `First` otherwise.

```
$ printf '2\n1\n3\n' | contest800-game-with-integers
First
Second
```

## Library use

Each solver module offers the solving function on its own. It also offers
`run(text)`, which takes the whole input as a string and returns the whole
output as a string, and `main(argv=None)`, which the commands call.

```python
from contest800.coins import can_pay
from contest800.cover_in_water import min_fill_actions
from contest800.game_with_integers import winner

can_pay(5, 3)            # True
min_fill_actions("...")  # 2
winner(3)                # "Second"
```

`contest800.numtheory` contains these helpers:

- `gcd(a, b)`: greatest common divisor.
- `expo(a, b, mod)`: modular exponentiation.
- `extended_gcd(a, b)`: returns `(x, y, g)` with `a*x + b*y == g`.
- `mminv(a, b)`: modular inverse by the extended Euclidean algorithm. The result may be negative.
- `mminvprime(a, b)`: modular inverse for a prime modulus.
- `combination(n, r, m, fact, ifact)`: `C(n, r) mod m`, computed from factorial tables that you supply.
- `sieve(n)`: the primes up to and including `n`.
- `mod_add`, `mod_sub`, `mod_mul`: arithmetic modulo `m`. Results lie in `[0, m)`.
- `mod_div(a, b, m)`: division modulo a prime `m`.
- `phin(n)`: Euler's totient. Raises `ValueError` for `n < 1`.
- `random_number(low, high)`: a uniform random integer in `[low, high]`. Raises `ValueError` if `low > high`.
- `MOD` and `MOD1`: the common moduli 1000000007 and 998244353.

```python
from contest800.numtheory import gcd, expo, sieve, phin, mod_div

gcd(12, 18)        # 6
expo(2, 10, 1000)  # 24
sieve(10)          # [2, 3, 5, 7]
phin(9)            # 6
mod_div(6, 3, 7)   # 2
```

## What this package does not do

- It has no command that exposes the number-theory helpers. They are available only as a library.
- The commands take no command-line options. Their input comes only from standard input.