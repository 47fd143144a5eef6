# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, and prints each operation as it is applied:

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the two top elements of `a` |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra`  | rotate `a` up: the top element becomes the last |
| `rra` | rotate `a` down: the last element becomes the top |

The values are first replaced by their ranks (0 for the smallest). Stacks of
two to five elements are sorted with fixed move sequences; larger stacks are
sorted with a binary radix sort over the ranks.

## Installation

```
pip install .
```

## Command line

The numbers can be given as separate arguments or as one string holding
numbers separated by spaces:

```
push_swap 3 2 1
push_swap "5 1 4 2 3"
```

The same command is available as `python -m pushswap.cli`.

The moves are written to standard output, one per line. Nothing is printed,
and the exit status is 0, when no argument is given or when the numbers are
already in strictly increasing order.

The input is rejected with `Error` on standard error and exit status 1 when:

- a word is not an integer: only an optional leading `-` followed by digits
  is accepted (a lone `-` and a leading `+` are rejected);
- a value lies outside the 32-bit signed range;
- a value is repeated;
- a single argument holds no numbers at all (for example `""` or `" "`).

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])   # ['sa', 'rra']
```

- `pushswap.sorting.solve(values)` returns the list of operation names that
  sorts `values`, or an empty list when they are already sorted. The lower
  level `sort_small`, `sort_big`, `sort_three`, `sort_four` and `sort_five`
  work on a `Stacks` object.
- `pushswap.parsing.parse_args(args)` turns command-line words into integers
  and raises `pushswap.parsing.ParseError` (a `ValueError`) on bad input.
  `parse_numbers`, `is_integer_word`, `split_words`, `count_words`, `atoi` and
  `atol` are the pieces it is built from.
- `pushswap.stack.Stacks(values, out)` holds the two stacks as deques (`a`
  and `b`, top first). Its methods `sa`, `ra`, `rra`, `pa` and `pb` apply an
  operation, write its name to `out` (standard output by default) and append
  it to `operations`; they raise `IndexError` when the stack is too small.
  `describe()` renders stack `a` with the rank of each value.
  `pushswap.stack.is_sorted` and `pushswap.stack.to_ranks` are also provided.

## Helper modules

The `pushswap.libft` sub-package holds small general-purpose helpers that the
solver does not need:

- `charclass`: ASCII classification and case conversion (`isdigit`,
  `isalpha`, `isalnum`, `isascii`, `isprint`, `islower`, `tolower`,
  `toupper`).
- `memory`: byte buffer helpers (`memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`).
- `strutil`: string helpers that return indices where a search is involved
  (`strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
  `strjoin`, `strtrim`, `substr`, `striteri`, `strmapi`, `itoa`).
- `linked`: `LinkedList`, a singly linked list with `append`, `appendleft`,
  `last`, `for_each`, `map` and `clear`.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`, writing
  to a text stream.
- `printf`: `render` and `printf` for the conversions `c`, `s`, `d`, `i`,
  `u`, `x`, `X`, `p` and `%`.
- `lines`: `LineReader` and `get_next_line`, reading a file descriptor one
  line at a time, as bytes.

## What it does not do

The package only produces a sequence of moves. It has no checker that reads
moves back and verifies them, and it does not use the operations `sb`, `ss`,
`rb`, `rr`, `rrb` or `rrr`.

## Tests

```
pip install ".[test]"
pytest
```