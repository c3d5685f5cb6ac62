from __future__ import annotations

import argparse
import json
import logging
import os

import uvicorn

from archgraph.analyze import analyze_units
from archgraph.corpus import CorpusError, DuplicatePolicy, filter_by_prefix
from archgraph.diagram import render_plantuml
from archgraph.fs_scan import load_units
from archgraph.graph import build_graph


def _load(parser: argparse.ArgumentParser, args: argparse.Namespace):
	root = os.path.abspath(args.path)
	if not os.path.isdir(root):
		parser.error(f"Invalid repository path: {root}")
	return root, load_units(root)


def cmd_analyze(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
	root, units = _load(parser, args)
	result = analyze_units(units, root=root, prefix=args.prefix, policy=args.duplicates)
	print(json.dumps(result.model_dump(mode="json"), indent=2))


def cmd_diagram(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
	_, units = _load(parser, args)
	graph = build_graph(filter_by_prefix(units, args.prefix), args.duplicates)
	print(render_plantuml(graph), end="")


def cmd_summary(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
	root, units = _load(parser, args)
	result = analyze_units(units, root=root, prefix=args.prefix, policy=args.duplicates)
	print(result.summaries.global_overview)


def cmd_serve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="archgraph")
	parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	def add_source_args(p: argparse.ArgumentParser) -> None:
		p.add_argument("path", help="Path to repository root")
		p.add_argument("--prefix", default="", help="Focus on files under this directory")
		p.add_argument(
			"--duplicates",
			choices=[policy.value for policy in DuplicatePolicy],
			default=None,
			help="Which file keeps a simple name shared by several files",
		)

	pa = sub.add_parser("analyze", help="Print metrics, graph and summary as JSON")
	add_source_args(pa)
	pa.set_defaults(func=cmd_analyze)

	pd = sub.add_parser("diagram", help="Print the class diagram as PlantUML")
	add_source_args(pd)
	pd.set_defaults(func=cmd_diagram)

	pm = sub.add_parser("summary", help="Print the textual repository summary")
	add_source_args(pm)
	pm.set_defaults(func=cmd_summary)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(levelname)s %(name)s: %(message)s",
	)
	try:
		args.func(parser, args)
	except CorpusError as e:
		parser.error(str(e))


if __name__ == "__main__":
	main()
