"""Command line entry point that reads a problem's input text and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from codedrills.combinatorics import (
    binomial,
    cheapest_diet,
    count_divisible_subarrays,
    measurable_weights,
)
from codedrills.districts import min_population_difference
from codedrills.graphs import (
    count_components,
    max_transport_weight,
    possible_destinations,
    shortest_cost,
    shortest_path,
    split_village_cost,
)
from codedrills.greedy import max_bound_sum, max_jewel_value, min_merge_cost, min_slime_energy
from codedrills.grid_search import PrefixSum2D, min_monkey_moves, virus_type_at, z_order
from codedrills.lab import max_safe_area
from codedrills.search import (
    closest_to_zero_pair,
    max_router_distance,
    min_bluray_size,
    min_crane_minutes,
)
from codedrills.segment_tree import process_queries
from codedrills.strings import is_ppap, palindrome_kind
from codedrills.taxi import Passenger, run_taxi

NOT_FOUND = -1


class _Reader:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended too early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def grid(self, rows: int, cols: int) -> list[list[int]]:
        return [self.numbers(cols) for _ in range(rows)]

    def edges(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.number(), self.number(), self.number()) for _ in range(count)]


_SOLVERS: dict[str, Callable[[_Reader], str]] = {}


def _problem(problem_id: str) -> Callable[[Callable[[_Reader], str]], Callable[[_Reader], str]]:
    def register(func: Callable[[_Reader], str]) -> Callable[[_Reader], str]:
        _SOLVERS[problem_id] = func
        return func

    return register


def _or_not_found(value: int | None) -> str:
    return str(NOT_FOUND if value is None else value)


@_problem("1647")
def _split_village(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    return str(split_village_cost(n, reader.edges(m)))


@_problem("1916")
def _cheapest_bus(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    edges = reader.edges(m)
    start, end = reader.numbers(2)
    return _or_not_found(shortest_cost(n, edges, start, end))


@_problem("11779")
def _cheapest_bus_route(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    edges = reader.edges(m)
    start, end = reader.numbers(2)
    found = shortest_path(n, edges, start, end)
    if found is None:
        return str(NOT_FOUND)
    cost, route = found
    return f"{cost}\n{len(route)}\n{' '.join(map(str, route))}"


@_problem("11724")
def _components(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    pairs = [(reader.number(), reader.number()) for _ in range(m)]
    return str(count_components(n, pairs))


@_problem("1939")
def _heaviest_load(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    bridges = reader.edges(m)
    start, end = reader.numbers(2)
    return str(max_transport_weight(n, bridges, start, end))


@_problem("9370")
def _destinations(reader: _Reader) -> str:
    lines = []
    for _ in range(reader.number()):
        n, m, t = reader.numbers(3)
        start, g, h = reader.numbers(3)
        roads = reader.edges(m)
        candidates = reader.numbers(t)
        found = possible_destinations(n, roads, start, g, h, candidates)
        lines.append(" ".join(map(str, found)))
    return "\n".join(lines)


@_problem("19238")
def _taxi(reader: _Reader) -> str:
    n, m, fuel = reader.numbers(3)
    grid = reader.grid(n, n)
    taxi = (reader.number() - 1, reader.number() - 1)
    passengers = []
    for _ in range(m):
        sy, sx, dy, dx = reader.numbers(4)
        passengers.append(Passenger((sy - 1, sx - 1), (dy - 1, dx - 1)))
    return _or_not_found(run_taxi(grid, taxi, passengers, fuel))


@_problem("14502")
def _lab(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    return str(max_safe_area(reader.grid(n, m)))


@_problem("1600")
def _monkey(reader: _Reader) -> str:
    k = reader.number()
    width, height = reader.numbers(2)
    return _or_not_found(min_monkey_moves(k, reader.grid(height, width)))


@_problem("18405")
def _virus(reader: _Reader) -> str:
    n, _kinds = reader.numbers(2)
    grid = reader.grid(n, n)
    seconds, row, col = reader.numbers(3)
    return str(virus_type_at(grid, seconds, row, col))


@_problem("11660")
def _range_sums(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    sums = PrefixSum2D(reader.grid(n, n))
    return "\n".join(str(sums.query(*reader.numbers(4))) for _ in range(m))


@_problem("1074")
def _z(reader: _Reader) -> str:
    n, r, c = reader.numbers(3)
    return str(z_order(n, r, c))


@_problem("17471")
def _districts(reader: _Reader) -> str:
    n = reader.number()
    populations = reader.numbers(n)
    adjacency = [reader.numbers(reader.number()) for _ in range(n)]
    return _or_not_found(min_population_difference(populations, adjacency))


@_problem("2470")
def _solutions(reader: _Reader) -> str:
    n = reader.number()
    a, b = closest_to_zero_pair(reader.numbers(n))
    return f"{a} {b}"


@_problem("2343")
def _bluray(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    return str(min_bluray_size(reader.numbers(n), m))


@_problem("1092")
def _cranes(reader: _Reader) -> str:
    cranes = reader.numbers(reader.number())
    boxes = reader.numbers(reader.number())
    return _or_not_found(min_crane_minutes(cranes, boxes))


@_problem("2110")
def _routers(reader: _Reader) -> str:
    n, c = reader.numbers(2)
    return str(max_router_distance(reader.numbers(n), c))


@_problem("1744")
def _bind(reader: _Reader) -> str:
    return str(max_bound_sum(reader.numbers(reader.number())))


@_problem("1202")
def _jewels(reader: _Reader) -> str:
    n, k = reader.numbers(2)
    jewels = [(reader.number(), reader.number()) for _ in range(n)]
    return str(max_jewel_value(jewels, reader.numbers(k)))


@_problem("13975")
def _merge_files(reader: _Reader) -> str:
    cases = reader.number()
    return "\n".join(str(min_merge_cost(reader.numbers(reader.number()))) for _ in range(cases))


@_problem("14698")
def _slimes(reader: _Reader) -> str:
    cases = reader.number()
    return "\n".join(str(min_slime_energy(reader.numbers(reader.number()))) for _ in range(cases))


@_problem("16120")
def _ppap(reader: _Reader) -> str:
    return "PPAP" if is_ppap(reader.word()) else "NP"


@_problem("17609")
def _palindromes(reader: _Reader) -> str:
    count = reader.number()
    return "\n".join(str(int(palindrome_kind(reader.word()))) for _ in range(count))


@_problem("11050")
def _binomial(reader: _Reader) -> str:
    n, k = reader.numbers(2)
    return str(binomial(n, k))


@_problem("19942")
def _diet(reader: _Reader) -> str:
    n = reader.number()
    minimums = reader.numbers(4)
    ingredients = [reader.numbers(5) for _ in range(n)]
    found = cheapest_diet(minimums, ingredients)
    if found is None:
        return str(NOT_FOUND)
    cost, chosen = found
    return f"{cost}\n{' '.join(map(str, chosen))}"


@_problem("2629")
def _balance(reader: _Reader) -> str:
    weights = reader.numbers(reader.number())
    targets = reader.numbers(reader.number())
    return " ".join("Y" if ok else "N" for ok in measurable_weights(weights, targets))


@_problem("10986")
def _divisible_runs(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    return str(count_divisible_subarrays(reader.numbers(n), m))


@_problem("2042")
def _segment_sums(reader: _Reader) -> str:
    n, m, k = reader.numbers(3)
    values = reader.numbers(n)
    queries = [reader.numbers(3) for _ in range(m + k)]
    return "\n".join(map(str, process_queries(values, queries)))


def problems() -> list[str]:
    """Identifiers of every problem that ``solve`` understands, sorted numerically."""
    return sorted(_SOLVERS, key=int)


def solve(problem: str, text: str) -> str:
    """Answer ``problem`` for the judge-style input ``text``, without a final newline."""
    try:
        solver = _SOLVERS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Reader(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="codedrills", description=main.__doc__)
    parser.add_argument("problem", nargs="?", help="problem number, such as 1916")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for standard input")
    parser.add_argument("--list", action="store_true", help="list the known problems and exit")
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(problems()))
        return 0
    if args.problem is None:
        parser.error("a problem number is required")

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            parser.exit(1, f"codedrills: {error}\n")

    try:
        answer = solve(args.problem, text)
    except ValueError as error:
        parser.exit(1, f"codedrills: {error}\n")
    print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())