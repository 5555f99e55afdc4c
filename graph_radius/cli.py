"""
Graph Radius CLI

Reads numbered examples from a GWF file and prints, for each one, the incidence
matrix, eccentricities, radius, central vertices and the radius graph.
"""
import argparse
import json
import sys
from typing import List, Optional, Sequence

from graph_radius import config
from graph_radius.errors import EmptyGraph, GraphError, GwfFormatError
from graph_radius.gwf import GwfSource
from graph_radius.report import ExampleResult, analyze_example, render_report, result_to_dict


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Graph radius, center and radius graph of GWF examples")
    parser.add_argument(
        "--file",
        type=str,
        default=config.DEFAULT_GWF_FILE,
        help="Path to the GWF file holding the examples."
    )
    parser.add_argument(
        "--examples",
        type=int,
        nargs="+",
        default=list(config.DEFAULT_EXAMPLES),
        help="Example numbers to analyze, in order."
    )
    parser.add_argument(
        "--vertices",
        type=int,
        default=None,
        help="Vertex count for every example (default: declared by the example, else %d)." % config.DEFAULT_VERTEX_COUNT
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Emit each radius-graph vertex pair once instead of once per direction."
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON list instead of text reports."
    )
    args = parser.parse_args(argv)
    if args.vertices is not None and args.vertices < 0:
        parser.error("--vertices must be a non-negative integer")
    return args


def run_examples(source: GwfSource, numbers: Sequence[int], vertex_count: Optional[int] = None,
                 deduplicate: bool = False, as_json: bool = False, out=None, err=None) -> List[ExampleResult]:
    """
    Analyzes each requested example. An example that cannot be analyzed is
    reported on err and skipped, and the remaining examples still run.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    results: List[ExampleResult] = []

    for number in numbers:
        try:
            example = source.example(number)
            result = analyze_example(example, vertex_count=vertex_count, deduplicate=deduplicate)
        except EmptyGraph as e:
            print(f"Error: {e}", file=err)
            continue
        except GraphError as e:
            # disconnected graphs, invalid vertices and edges
            print(f"Error: Example {number}: {e}", file=err)
            continue
        results.append(result)
        if not as_json:
            print(render_report(result), file=out)

    if as_json:
        print(json.dumps([result_to_dict(result) for result in results], indent=2), file=out)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        source = GwfSource.from_file(args.file)
    except OSError:
        print(f"Error: Unable to open file {args.file}", file=sys.stderr)
        return 1
    except GwfFormatError as e:
        print(f"Error: {args.file}: {e}", file=sys.stderr)
        return 1

    run_examples(source, args.examples, vertex_count=args.vertices,
                 deduplicate=args.dedupe, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
