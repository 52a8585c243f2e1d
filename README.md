# numbertoolkit

A compact collection of everyday number utilities, usable from Python and,
for a handful of them, from the command line.

- **`numbertoolkit.units`**: temperature (Fahrenheit/Celsius), currency
  (USD to Euro, JPY and RMB at fixed rates), mass (ounces and grams to
  pounds), and a parcel shipping charge.
- **`numbertoolkit.arith`**: prime tests, odd primes within a range,
  factorials, integer powers, Fibonacci series, binary digits, digit
  reversal, Armstrong and palindrome numbers, friendly pairs and leap years.
- **`numbertoolkit.patterns`**: star pyramids, multiplication tables, string
  reversal, Tower of Hanoi moves and bubble sort.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from numbertoolkit import arith, patterns, units

arith.is_prime(7)                 # True  (trial division up to n // 2)
arith.is_prime_fast(7)            # True  (6k +/- 1 trial division)
arith.is_leap_year(2000)          # True
arith.factorial(5)                # 120
arith.power(2, 10)                # 1024
arith.fibonacci_series(8)         # [0, 1, 1, 2, 3, 5, 8, 13]
arith.to_binary(10)               # "1010"
arith.reverse_digits(123)         # 321
arith.is_palindrome_number(121)   # True
arith.is_armstrong(153)           # True
arith.divisor_sum(28)             # 28
arith.is_friendly_pair(6, 28)     # True
arith.primes_in_range(10, 30)     # [11, 13, 17, 19, 23, 29]

units.fahrenheit_to_celsius(212)  # 100
units.celsius_to_fahrenheit(100)  # 212
units.usd_to_euro(100)            # about 87.0
units.grams_to_pounds(500)        # about 1.10
units.parcel_charge(3.5)          # 48.25
units.convert("T", 1, 212)        # ("Celcius", 100)

patterns.reverse_string("hello")  # "olleh"
patterns.bubble_sort([3, 1, 2])   # [1, 2, 3]
patterns.multiplication_table(7)  # ["7 * 1 = 7", ..., "7 * 10 = 70"]
patterns.pyramid(3)               # list of lines of a star pyramid
list(patterns.hanoi_moves(2))     # [(1, "S", "H"), (2, "S", "D"), (1, "H", "D")]
```

Some behaviour worth knowing:

- Temperature conversions take and return whole degrees, truncated toward
  zero.
- `convert(category, choice, value)` takes a category letter (`T`
  temperature, `C` currency, `M` mass) and a menu number within it, and
  returns the target unit's label with the converted value. An unknown
  category or choice raises `ValueError`.
- `parcel_charge` is 32.50 up to 2 kg, plus 10.50 for each kilogram beyond.
- `fibonacci_series` always returns at least the first two terms.
- `to_binary` returns an empty string for zero or negative numbers.
- `primes_in_range(low, high)` examines only odd numbers from `low` (or the
  next odd number) to `high`, so 2 is never listed and 1 is listed when the
  range starts at 1. It raises `ValueError` when `high` is below 2.
- `hanoi_moves` yields `(disk, from_peg, to_peg)` tuples; pegs default to
  `"S"`, `"H"` and `"D"`. Fewer than one disk raises `ValueError`.
- `bubble_sort` returns a new list and leaves its input untouched.

## Using it from the command line

Installing the package provides a `numbertoolkit` command with five
subcommands:

```
numbertoolkit convert T 1 212     # Celcius: 100
numbertoolkit convert C 2 10      # JPY: 1110.90
numbertoolkit armstrong 153       # armstrong number
numbertoolkit leap 2024           # 2024 is a leap year
numbertoolkit primes 10 30        # lists the primes and how many there are
numbertoolkit hanoi 3             # Move 1 from S to D ... (5 disks if omitted)
```

`convert` takes whole-number values only. Currency and mass results are
printed with two decimal places. The command exits with status 1 for an
invalid conversion choice or a disk count below one.

## What it does not do

The command line is not interactive: it does not prompt for input, and it
covers only conversions, Armstrong numbers, leap years, primes in a range and
the Tower of Hanoi. Everything else is available from Python only.