"""Compile a named-placeholder query from the command line.

Usage::

    python -m namedsql 'SELECT * FROM t WHERE a = $a AND b = $b'
    python -m namedsql --target sqlite --json 'SELECT $b, $a, $b'
    echo 'SELECT $id' | python -m namedsql -
"""
from __future__ import annotations

import argparse
import json
import sys

from namedsql.compile import compile_sql, marker_styles
from namedsql.errors import NamedSQLError


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="python -m namedsql",
        description="Rewrite $name placeholders to positional placeholders.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument("query", help="SQL text, or '-' to read it from stdin.")
    p.add_argument(
        "--target", choices=list(marker_styles()), default="postgres",
        help="Positional marker style (default: postgres).",
    )
    p.add_argument(
        "--json", action="store_true",
        help="Print the compiled query as a JSON object.",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    query = sys.stdin.read() if args.query == "-" else args.query

    try:
        compiled = compile_sql(query, args.target)
    except NamedSQLError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({
            "sql": compiled.normalized_sql,
            "params": list(compiled.ordered_names),
            "dialect": compiled.dialect,
        }))
    else:
        print(compiled.normalized_sql)
        for i, name in enumerate(compiled.ordered_names, start=1):
            print(f"  {i}: {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
