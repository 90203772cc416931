"""``watchclub routes``: list the route table in match order."""

import argparse

from watchclub.pages import ROUTES


def run_routes(args: argparse.Namespace) -> None:
    """Print PATTERN, NAME and CONTROLLER for every route, first match first."""
    rows = [(pattern, name, controller.__name__) for pattern, controller, name in ROUTES]
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATTERN", "NAME", "CONTROLLER"))
    sep_len = max_pattern + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, name, controller in rows:
        print(fmt.format(pattern, name, controller))
