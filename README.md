# algokit

A small collection of classic algorithms in plain Python:

- binary, decimal and hexadecimal conversions and binary addition
- number checks: Armstrong numbers, leap years and primes
- Fibonacci terms and digit reversal
- bubble, insertion, merge, quick and selection sort
- binary search over a sorted sequence
- string utilities: palindromes, comparison and partition counting

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library usage

### Conversions (`algokit.conversions`)

```python
from algokit.conversions import (
    add_binary_int,
    add_binary_string,
    binary_to_decimal,
    binary_to_hex,
    decimal_to_binary,
    decimal_to_hex,
    hex_to_binary,
    hex_to_decimal,
)

add_binary_int(5, 3)              # 8
add_binary_string("101", "11")    # "1000"
binary_to_decimal("1101")         # 13
decimal_to_binary(13)             # "00000000000000000000000000001101"
hex_to_binary("1D")               # "00011101"
binary_to_hex("00011101")         # "1D"
hex_to_decimal("1D")              # 29
decimal_to_hex(29)                # "0000001D"
```

Notes on behaviour:

- `add_binary_int` adds with XOR, AND and shifts and wraps like a signed
  32-bit integer.
- `decimal_to_binary` returns the 32-bit two's complement bit string, and
  `decimal_to_hex` the matching eight hexadecimal digits.
- `binary_to_decimal` and `hex_to_binary` raise `ValueError` on characters
  that are not binary or hexadecimal digits.
- `binary_to_hex` drops leading bits that do not fill a whole group of four.
- `binary_string_to_int` treats every character other than `"1"` as a zero
  bit.
- `binary_to_int` weighs each decimal digit by its power of two and raises
  `ValueError` on non-digits; `int_to_binary` returns the bits of a positive
  integer and raises `ValueError` for zero or negative values.

### Numbers (`algokit.numbers`)

```python
from algokit.numbers import (
    fibonacci,
    is_armstrong,
    is_leap_year,
    is_prime,
    reverse_int,
    reverse_number,
    total_digits,
)

is_armstrong(153)      # True  (sum of the cubes of its digits)
fibonacci(6)           # [0, 1, 1, 2, 3, 5]
is_leap_year(2000)     # True
is_leap_year(1900)     # False
is_prime(7)            # True
reverse_number(123)    # 321
reverse_int(-123)      # -321
total_digits(4096)     # 4
```

`reverse_int` returns 0 when the input or its reversal does not fit in a
signed 32-bit integer. `reverse_number` returns 0 for values that are not
positive.

### Sorting (`algokit.sorting`)

```python
from algokit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

merge_sort([12, 11, 13, 5, 6, 7])    # [5, 6, 7, 11, 12, 13]
quick_sort([81, 27, 38, 99, 51, 5])  # [5, 27, 38, 51, 81, 99]
```

Each sort takes any iterable and returns a new list, leaving its input
untouched. The helpers are available too: `merge(left, right)` merges two
sorted sequences (ties take from `left` first), and
`partition(items, low, high)` performs a Lomuto partition of
`items[low:high + 1]` in place around `items[high]` and returns the pivot's
final index.

### Searching (`algokit.search`)

```python
from algokit.search import binary_search

binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 7)   # 6
```

`binary_search` raises `ValueError` when the target is not present.

### Strings (`algokit.strings`)

```python
from algokit.strings import is_palindrome, my_strcmp, partition_string, strings_equal

is_palindrome("madam")           # True
strings_equal("python", "dsa")   # False
my_strcmp("hello", "world")      # -1
my_strcmp("world", "hello")      # 1
my_strcmp("hello", "hello")      # 0
partition_string("abacaba")      # 4
```

`partition_string` counts the pieces in a greedy split into runs of
characters that do not repeat; an empty string counts as one piece.

## Command line

Installing the package provides an `algokit` command for the number checks.
Each subcommand takes an integer; when it is left out, the command asks for
it on standard input.

```
algokit armstrong 153
algokit fibonacci 10
algokit leap-year 2024
algokit prime 97
algokit reverse 1234
```

See all options with:

```
algokit --help
```

The command line covers only the number checks; conversions, sorting,
searching and string utilities are available through the library alone.