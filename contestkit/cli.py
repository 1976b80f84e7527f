"""Command-line entry point: solve one problem with its input on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from contestkit import (
    combinatorics,
    divisors,
    flows,
    geometry,
    graph_order,
    grid_search,
    hull,
    navigation,
    negative_cycles,
    shortest_paths,
    strings,
    text_structure,
    unionfind,
)
from contestkit.geometry import _format_float
from contestkit.tokens import TokenReader

DEFAULT_PROBLEM = "farthest-pair-brute"


def _run_farthest_pair_brute(text: str) -> str:
    reader = TokenReader(text)
    c = reader.scan(int)
    points = [reader.scan(int, int) for _ in range(c)]
    return f"{_format_float(hull.farthest_pair_brute(points))}\n"


_RUNNERS: list[Callable[[str], str]] = [
    unionfind.run_unconnected_houses,
    grid_search.run_collect_gold,
    grid_search.run_coast_length,
    grid_search.run_min_passable_level,
    graph_order.run_min_lab_switches,
    graph_order.run_min_wiring_cost,
    graph_order.run_bipartite_component_count,
    shortest_paths.run_jumping_grid_moves,
    shortest_paths.run_cheapest_descent_path,
    shortest_paths.run_flower_route_length,
    negative_cycles.run_has_arbitrage,
    negative_cycles.run_is_winnable,
    flows.run_max_gcd_flow,
    flows.run_castle_defense_cost,
    strings.run_typed_length,
    strings.run_max_possible_correct,
    strings.run_has_knight_word,
    strings.run_min_compressed_length,
    text_structure.run_count_hill_numbers,
    text_structure.run_max_power,
    text_structure.run_repeated_substring_counts,
    text_structure.run_palindrome_swap_costs,
    combinatorics.run_gear_ratios,
    combinatorics.run_kth_crossed_out,
    combinatorics.run_path_count,
    divisors.run_classify_perfection,
    divisors.run_coin_combinations,
    divisors.run_binomial_divisor_count,
    divisors.run_election_verdict,
    divisors.run_last_nonzero_factorial_digit,
    geometry.run_polygon_area,
    geometry.run_platform_support_length,
    geometry.run_rope_length,
    geometry.run_gps_error_percent,
    navigation.run_bounce_angle_speed,
    navigation.run_missing_argument,
    hull.run_simplify_polygon,
    hull.run_farthest_pair_distance,
]

PROBLEMS: dict[str, Callable[[str], str]] = {
    runner.__name__.removeprefix("run_").replace("_", "-"): runner for runner in _RUNNERS
}
PROBLEMS[DEFAULT_PROBLEM] = _run_farthest_pair_brute


def main(argv: list[str] | None = None) -> int:
    """Read the chosen problem's input from stdin and print its answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem read from standard input."
    )
    parser.add_argument(
        "problem",
        nargs="?",
        default=DEFAULT_PROBLEM,
        choices=sorted(PROBLEMS),
        help=f"problem to solve (default: {DEFAULT_PROBLEM})",
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read()
    try:
        output = PROBLEMS[args.problem](text)
    except (ValueError, EOFError) as exc:
        print(f"contestkit: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())