# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of moves, and prints the moves it used, one per line.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, as space-separated strings, or both:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The values are read in order and each one is pushed on top of stack `a`,
so the last value given ends up on top. The goal is stack `a` in ascending
order from the top, with `b` empty.

The moves are found with a binary radix sort over each value's rank: for
each bit, values with that bit clear are sent to `b` with `pb`, the others
are rotated with `ra`, and then `b` is brought back with `pa`. Only these
three moves appear in the output. The sequence is not minimised, and input
that is already sorted still produces moves.

If the input holds a duplicate, a token that is not an integer (including
one with trailing characters such as `12abc`), a value outside the 32-bit
signed range, or a zero, the program prints `Error` and exits with status 1.
With no arguments, or an empty first argument, it exits with status 1 and
prints nothing.

## The moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of stack a                |
| `sb`  | swap the top two elements of stack b                |
| `ss`  | `sa` then `sb`                                      |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a upwards: the top element becomes the last  |
| `rb`  | rotate b upwards                                    |
| `rr`  | `ra` then `rb`                                      |
| `rra` | rotate a downwards: the last element becomes the top|
| `rrb` | rotate b downwards                                  |
| `rrr` | `rra` then `rrb`                                    |

## Library use

```python
from pushswap.cli import solve

moves = solve(["3", "2", "1"])   # list of move names
```

- `pushswap.cli`: `build_stack(args)` returns stack `a` top first,
  `solve(args)` returns the moves, `main(argv=None)` is the command.
- `pushswap.parsing`: `parse_arguments(args)` reads the integers and raises
  `InputError` (a `ValueError`) on bad input; `check_duplicates(values)`
  raises it on a repeated value.
- `pushswap.stacks.Stacks(a=None, b=None)`: the two stacks as deques, top
  first, with the methods `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`,
  `rra`, `rrb`, `rrr`. Every move that takes effect is appended to
  `operations`. Swaps and rotations of a stack with fewer than two values do
  nothing and are not recorded; `ss`, `rr` and `rrr` record the single moves
  that took effect followed by their own name. `pa` and `pb` raise
  `IndexError` when the stack they take from is empty.
- `pushswap.ranking.rank_values(values)`: each value's index in ascending
  sorted order.
- `pushswap.radix`: `radix_sort(stacks)` sorts the ranks in `stacks.a` and
  returns the moves it made; `find_max_index(indices)` and
  `calculate_max_bits(value)` are its helpers.

The package also carries small general helpers that the sorter builds on:

- `pushswap.text`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `strmapi`, `striteri`, `strlen`.
- `pushswap.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper`, for one-character strings or codes.
- `pushswap.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memcmp`,
  `memchr`, `calloc` on `bytearray` buffers.
- `pushswap.lists`: `Node` and `LinkedList`, a singly linked list.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a stream (standard output by default).
- `pushswap.formatter`: `format_string(fmt, *args)` and `printf(fmt, *args)`
  with the conversions `c`, `s`, `d`, `i`, `u`, `x`, `X`, `p` and `%`.

## What it does not do

There is no command that reads a list of moves and checks whether they sort
a given input; the package only produces moves.

## Tests

```
pip install .[test]
pytest
```