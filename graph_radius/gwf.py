"""
Reader for GWF graph files.

A GWF file holds several numbered examples:

    # Example 1
    vertices:
    0
    1
    2
    edges:
    0 1
    1 2
    end

The vertex section is optional. Blank lines and other '#' lines are ignored.
"""
import re
from typing import Dict, List, Optional

from graph_radius.errors import EmptyGraph, GwfFormatError
from graph_radius.incidence import Edge

EXAMPLE_HEADER = re.compile(r"^#\s*Example\s+(\S+)\s*$")


class GwfExample:
    """One parsed example: its number, declared vertices and edge list."""
    def __init__(self, number: int, vertices: Optional[List[int]] = None, edges: Optional[List[Edge]] = None):
        self.number = number
        self.vertices = vertices if vertices else []
        self.edges = edges if edges else []

    def vertex_count(self, default: int) -> int:
        """Declared vertex count (largest id + 1), or default when no vertices are declared."""
        if self.vertices:
            return max(self.vertices) + 1
        return default

    def __repr__(self):
        return f"GwfExample(number={self.number}, vertices={self.vertices}, edges={self.edges})"


def _parse_ints(line: str, count: int, line_number: int, what: str) -> List[int]:
    parts = line.split()
    if len(parts) != count:
        raise GwfFormatError(line_number, line, f"expected {count} integer(s) for {what}")
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise GwfFormatError(line_number, line, f"non-integer {what}") from None


def parse_gwf(text: str) -> Dict[int, GwfExample]:
    """
    Parse every example in a GWF document.

    Args:
        text (str): Full file contents.

    Returns:
        Dict[int, GwfExample]: Examples keyed by their number, in file order.
    """
    examples: Dict[int, GwfExample] = {}
    current: Optional[GwfExample] = None
    section: Optional[str] = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        header = EXAMPLE_HEADER.match(line)
        if header:
            try:
                number = int(header.group(1))
            except ValueError:
                raise GwfFormatError(line_number, line, "example number is not an integer") from None
            if number in examples:
                raise GwfFormatError(line_number, line, f"example {number} is defined twice")
            current = GwfExample(number)
            examples[number] = current
            section = None
            continue

        if line.startswith("#"):
            continue
        if current is None:
            raise GwfFormatError(line_number, line, "content outside of an example")

        if line == "vertices:":
            section = "vertices"
        elif line == "edges:":
            section = "edges"
        elif line == "end":
            current, section = None, None
        elif section == "vertices":
            current.vertices.extend(_parse_ints(line, 1, line_number, "vertex"))
        elif section == "edges":
            u, v = _parse_ints(line, 2, line_number, "edge")
            current.edges.append((u, v))
        else:
            raise GwfFormatError(line_number, line, "expected 'vertices:' or 'edges:'")

    return examples


class GwfSource:
    """
    Parsed GWF file. Each example() call hands out one example on its own;
    nothing is shared between calls.
    """
    def __init__(self, examples: Dict[int, GwfExample], path: Optional[str] = None):
        self.path = path
        self._examples = examples

    @classmethod
    def from_file(cls, path: str) -> "GwfSource":
        with open(path, "r") as f:
            return cls(parse_gwf(f.read()), path=path)

    @classmethod
    def from_text(cls, text: str) -> "GwfSource":
        return cls(parse_gwf(text))

    def numbers(self) -> List[int]:
        return list(self._examples)

    def example(self, number: int) -> GwfExample:
        found = self._examples.get(number)
        if found is None or not found.edges:
            raise EmptyGraph(f"No edges found for example {number}", example_number=number)
        return GwfExample(found.number, list(found.vertices), list(found.edges))
