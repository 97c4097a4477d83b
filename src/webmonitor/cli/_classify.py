"""``webmonitor classify`` — resolve urls to their best-matching pattern."""

import argparse

from webmonitor.cli._load import load_registry


def run_classify(args: argparse.Namespace) -> None:
    """Print one ``URL  PATTERN`` row per url in ``args.urls``."""
    registry = load_registry(args.patterns)

    rows = [(url, registry.classify(url)) for url in args.urls]
    width = max(max(len(url) for url, _ in rows), 3)  # "URL" header

    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("URL", "PATTERN"))
    for url, pattern in rows:
        print(fmt.format(url, pattern))
