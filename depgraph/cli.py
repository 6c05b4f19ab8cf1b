"""Command line entry point printing dependency graph reports as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from depgraph import config
from depgraph.api import DependencyGraphApp
from depgraph.graph.errors import GraphError
from depgraph.ingest.manifest import INSTALL_DIRECTORIES

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Build the dependency graph of an npm or bower project and query it.",
    )
    parser.add_argument("project", nargs="?", default=None, help="Project root (default: DEPGRAPH_PROJECT_PATH or .)")
    parser.add_argument("--manager", choices=sorted(INSTALL_DIRECTORIES), default=None, help="Package manager")
    parser.add_argument("--strict", action="store_true", default=None, help="Abort on the first manifest problem")
    report = parser.add_mutually_exclusive_group()
    report.add_argument("--dependencies", metavar="NAME", help="List what NAME depends on")
    report.add_argument("--dependants", metavar="NAME", help="List what depends on NAME")
    report.add_argument("--export", choices=("json", "graphml"), help="Export the whole graph")
    return parser


def run(args: argparse.Namespace) -> str:
    app = DependencyGraphApp()
    app.handle(
        {
            "action": "scan",
            "params": {
                "project_path": args.project,
                "package_manager": args.manager,
                "strict": args.strict,
            },
        }
    )

    if args.dependencies:
        result = app.handle({"action": "dependencies_of", "params": {"name": args.dependencies}})["result"]
    elif args.dependants:
        result = app.handle({"action": "dependants_of", "params": {"name": args.dependants}})["result"]
    elif args.export:
        return app.handle({"action": "export", "params": {"format": args.export}})["result"]["content"]
    else:
        result = app.handle({"action": "list_dependencies", "params": {}})["result"]
    return json.dumps(result, indent=4)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.log_level(), format="%(levelname)s %(name)s: %(message)s")
    try:
        output = run(args)
    except (GraphError, ValueError) as exc:
        LOGGER.debug("Command failed", exc_info=True)
        print(f"depgraph: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
