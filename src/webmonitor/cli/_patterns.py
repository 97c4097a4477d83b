"""``webmonitor patterns`` — show how a pattern file is partitioned.

Prints every pattern with its bucket (``simple``, ``prefix:<key>``, or
``complicated``) followed by the total count.
"""

import argparse

from webmonitor.cli._load import load_registry


def run_patterns(args: argparse.Namespace) -> None:
    registry = load_registry(args.patterns)
    table = registry.table

    rows: list[tuple[str, str]] = []
    rows.extend(("simple", pattern) for pattern in sorted(table.simple))
    for prefix in sorted(table.prefix_keyed.keys()):
        rows.extend((f"prefix:{prefix}", pattern) for pattern in sorted(table.prefix_keyed[prefix]))
    rows.extend(("complicated", pattern) for pattern in sorted(table.complicated))

    if not rows:
        print("No url patterns loaded.")
        return

    max_kind = max(max(len(kind) for kind, _ in rows), 4)  # "KIND" header
    fmt = f"{{:<{max_kind}}}  {{}}"
    print(fmt.format("KIND", "PATTERN"))
    print("-" * min(max_kind + 2 + max(len(p) for _, p in rows), 80))
    for kind, pattern in rows:
        print(fmt.format(kind, pattern))
    print(f"\n{registry.count()} url patterns")
