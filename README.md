# contestkit

Solvers for classic programming-contest problems, written as plain importable
Python functions. Most problems have two entry points:

- a function that takes already-parsed values and returns the answer, for example
  `contestkit.grid_search.collect_gold(grid)` or
  `contestkit.flows.max_gcd_flow(numbers)`;
- a `run_*` function that takes the whole problem input as text, in the usual
  contest format, and returns the output text, for example
  `contestkit.shortest_paths.run_flower_route_length(text)`.

Malformed input raises `ValueError`; input that ends too early raises `EOFError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `contestkit.tokens` | `TokenReader`: reads whitespace-separated tokens with `scan` and `scan_optional` |
| `contestkit.unionfind` | `UnionFind` with per-component data merged on `unite`; `unconnected_houses` |
| `contestkit.grid_search` | `collect_gold`, `coast_length`, `can_cross`, `min_passable_level` |
| `contestkit.graph_order` | `min_lab_switches`, `min_wiring_cost`, `bipartite_component_count` |
| `contestkit.shortest_paths` | `jumping_grid_moves`, `cheapest_descent_path`, `flower_route_length` |
| `contestkit.negative_cycles` | `has_arbitrage`, `is_winnable` (Bellman–Ford relaxation) |
| `contestkit.flows` | `gcd_ext`, `max_gcd_flow`, `castle_defense_cost` (augmenting-path maximum flow) |
| `contestkit.strings` | `RollingHasher`, `typed_length`, `max_possible_correct`, `has_knight_word`, `min_compressed_length` |
| `contestkit.text_structure` | `z_array`, `suffix_array`, `max_power`, `repeated_substring_counts`, `count_hill_numbers`, `palindrome_swap_costs` |
| `contestkit.combinatorics` | `gear_ratios` (as `fractions.Fraction`), `kth_crossed_out`, `path_count` |
| `contestkit.divisors` | `prime_factors`, `classify_perfection`, `coin_combinations`, `binomial_divisor_count`, `election_verdict`, `last_nonzero_factorial_digit` |
| `contestkit.geometry` | `polygon_area`, `platform_support_length`, `rope_length`, `gps_error_percent` |
| `contestkit.navigation` | `Command` (turtle commands `fd`, `lt`, `bk`, `rt`), `bounce_angle_speed`, `missing_argument` |
| `contestkit.hull` | `simplify_polygon`, `farthest_pair_distance` (convex hull), `farthest_pair_brute` |
| `contestkit.cli` | the `contestkit` command |

`min_compressed_length(s, base=None)` hashes with a random base unless one is given.

## Examples

```python
from contestkit.unionfind import UnionFind

uf = UnionFind([1, 2, 3, 4], lambda a, b: a + b)
uf.unite(0, 1)
uf.unite(2, 3)
assert uf.find(0) == uf.find(1)
assert uf.query(0) == 3
```

```python
from contestkit.hull import farthest_pair_distance

print(farthest_pair_distance([(0, 0), (3, 4), (1, 1)]))  # 5.0
```

## Command line

```
contestkit [PROBLEM] < input.txt
```

The `contestkit` command reads the input of one problem from standard input and
writes the answer to standard output. It exits with status 1 and a message on
standard error when the input is malformed or incomplete.

Without a `PROBLEM` argument it runs `farthest-pair-brute`: a point count followed
by that many `x y` pairs, answered with the largest distance between two points.

```
printf '3\n0 0\n3 4\n1 1\n' | contestkit
```

prints `5`.

```
printf '4 2\n1 2\n3 4\n' | contestkit unconnected-houses
```

prints `3` and `4`, the houses not connected to house 1.

The problem names are those of the `run_*` functions with `run_` dropped and
underscores turned into hyphens:

`unconnected-houses`, `collect-gold`, `coast-length`, `min-passable-level`,
`min-lab-switches`, `min-wiring-cost`, `bipartite-component-count`,
`jumping-grid-moves`, `cheapest-descent-path`, `flower-route-length`,
`has-arbitrage`, `is-winnable`, `max-gcd-flow`, `castle-defense-cost`,
`typed-length`, `max-possible-correct`, `has-knight-word`, `min-compressed-length`,
`count-hill-numbers`, `max-power`, `repeated-substring-counts`,
`palindrome-swap-costs`, `gear-ratios`, `kth-crossed-out`, `path-count`,
`classify-perfection`, `coin-combinations`, `binomial-divisor-count`,
`election-verdict`, `last-nonzero-factorial-digit`, `polygon-area`,
`platform-support-length`, `rope-length`, `gps-error-percent`,
`bounce-angle-speed`, `missing-argument`, `simplify-polygon`,
`farthest-pair-distance`, `farthest-pair-brute`.