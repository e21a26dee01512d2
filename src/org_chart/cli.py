import argparse
import logging
import sys

from directory_connector import DirectoryConnectionError
from graph_renderer import render_graph
from tree_builder import OrgChartError, build_tree
from tree_builder.sample import SAMPLE_ORG

from org_chart.config import Settings

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build an org chart for a directory user and write it as a Graphviz .dot file"
    )
    parser.add_argument("user", nargs="?", help="identifier of the person at the top of the chart")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the DOT output to FILE instead of stdout",
    )
    parser.add_argument("--title", default="", help="graph title (default: 'Org Chart - <name>')")
    parser.add_argument("--max-depth", type=int, help="override SEARCH_DEPTH")
    parser.add_argument("--max-users", type=int, help="override MAX_USERS")
    parser.add_argument("--backend", choices=["ldap", "neo4j"], help="override DIRECTORY_BACKEND")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="render the bundled sample organization instead of querying a directory",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="log traversal details")
    return parser


def start_cli(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.demo and not args.user:
        parser.error("a user is required unless --demo is given")

    settings = settings or Settings()
    if args.backend:
        settings = settings.model_copy(update={"directory_backend": args.backend})

    try:
        if args.demo:
            root = SAMPLE_ORG
        else:
            config = settings.build_config(max_depth=args.max_depth, max_total_nodes=args.max_users)
            with settings.create_connector() as directory:
                root = build_tree(args.user, config, directory)
        logger.debug("Rendering %d people below %s", root.size(), root.name)
        output = render_graph(args.title, root)
    except (OrgChartError, DirectoryConnectionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
        print(f"Org chart written to {args.output} ({root.size()} people)")
    else:
        print(output)
    return 0


def main() -> None:
    sys.exit(start_cli())


if __name__ == "__main__":
    main()
