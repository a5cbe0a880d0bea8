# contestkit

A collection of solved competitive programming problems. Each one is an ordinary Python
function: it takes the problem's input as Python values and returns the answer. A small
command line front end reads judge-style input text and prints judge-style output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

- `contestkit.modmath`: modular arithmetic helpers `add`, `sub`, `mul`, `power` and
  `inverse`. The modulus defaults to `10**9 + 7`; `inverse(a, p)` uses Fermat's little
  theorem and expects a prime `p`.
- `contestkit.number_theory`: `sieve_primes`, `lonely_numbers`, `weakened_common_divisor`,
  `congruence_solutions`, `max_frogs_caught`, `sum_product_pairs`.
- `contestkit.simple`: short closed-form problems: `strange_functions`, `min_jumps`,
  `ping_pong`, `not_acceptable`, `dinner_time`, `bobritto_bandito`, `chat_ban`.
- `contestkit.games`: greedy decisions: `lrc_vip`, `apples_winner`, `can_color_picture`.
- `contestkit.arrays`: `reorder_for_max`, `kevin_can_transform`, `kadane`,
  `fill_maximum_subarray`, `scoring_subsequences`, `max_magnitude`, `nonzero_partition`,
  `party_sweets`.
- `contestkit.graphs`: `trapped_cells`, `tree_edge_weights`, `disappearing_permutation`,
  `greetings`.
- `contestkit.brackets`: the bracket walk problem, with an incremental `BracketWalk` whose
  `flip(position)` answers after each flip, and a one-shot `bracket_walk(s, queries)`.
- `contestkit.cli`: `run(problem, text)` and the `main` entry point of the command.

Where a problem has no answer, the function returns `None` (for example
`weakened_common_divisor`, `party_sweets`, `nonzero_partition`). Input that breaks a
problem's rules raises `ValueError` (or `IndexError` for an out-of-range bracket position).

## Using the functions

```python
from contestkit.arrays import kadane
from contestkit.modmath import mul
from contestkit.simple import min_jumps

kadane([1, -2, 3])            # best subarray sum: 3
min_jumps(2)                  # fewest jumps to reach point 2: 3
mul(10**9, 10**9, 10**9 + 7)  # product reduced modulo 10**9 + 7
```

## Command line

```
contestkit PROBLEM [INPUT]
```

The command reads the problem's input from the file `INPUT`, or from standard input when
no file is given, and prints the answers. On bad input it prints a message to standard
error and exits with status 1.

The problem names are:

```
anu-function            apples-in-boxes         bobritto-bandito
bracket-walk            chat-ban                color-the-picture
congruence-equation     dinner-time             disappearing-permutation
frogs                   greetings               jumps
kevin-and-numbers       lonely-numbers          lrc-vip
magnitude               maximum-subarray-sum    nonzero-sum
not-acceptable          party-sweets            ping-pong
scoring-subsequences    strange-functions       sum-and-product
trapped-cells           tree-edge-weights       weakened-common-divisor
```

`anu-function`, `bracket-walk`, `congruence-equation`, `lonely-numbers`,
`not-acceptable`, `party-sweets` and `weakened-common-divisor` take a single test; every
other problem expects the number of test cases first. For example:

```
echo "2 5 1" | contestkit chat-ban
```

The same can be done from Python:

```python
from contestkit.cli import run

run("ping-pong", "1\n2 3\n")  # "1 3\n"
```

## What it does not do

Each problem has a fixed solver; the package does not judge submissions, fetch problems or
keep any record of runs.