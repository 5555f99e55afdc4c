import os
import tempfile
import unittest
from graph_radius.errors import EmptyGraph, GwfFormatError
from graph_radius.gwf import GwfExample, GwfSource, parse_gwf

SAMPLE = """# Sample file
# Example 1
vertices:
0
1
2
edges:
0 1
1 2
end

# Example 2
edges:
  3 4
0 3
end

# Example 7
vertices:
0
edges:
end
"""


class TestGwfParsing(unittest.TestCase):

    def setUp(self):
        self.examples = parse_gwf(SAMPLE)

    def test_examples_in_file_order(self):
        self.assertEqual(list(self.examples), [1, 2, 7])

    def test_vertices_and_edges(self):
        first = self.examples[1]
        self.assertEqual(first.vertices, [0, 1, 2])
        self.assertEqual(first.edges, [(0, 1), (1, 2)])

        second = self.examples[2]
        self.assertEqual(second.vertices, [])
        self.assertEqual(second.edges, [(3, 4), (0, 3)])

    def test_vertex_count(self):
        # Declared vertices win, otherwise the default is used
        self.assertEqual(self.examples[1].vertex_count(default=5), 3)
        self.assertEqual(self.examples[2].vertex_count(default=5), 5)

    def test_example_without_end_is_closed_at_eof(self):
        examples = parse_gwf("# Example 3\nedges:\n0 1\n")
        self.assertEqual(examples[3].edges, [(0, 1)])

    def test_malformed_edge_line(self):
        with self.assertRaises(GwfFormatError) as ctx:
            parse_gwf("# Example 1\nedges:\n0 1\n0 x\nend\n")
        self.assertEqual(ctx.exception.line_number, 4)

        with self.assertRaises(GwfFormatError):
            parse_gwf("# Example 1\nedges:\n0 1 2\nend\n")

    def test_line_before_section(self):
        with self.assertRaises(GwfFormatError):
            parse_gwf("# Example 1\n0 1\nend\n")

    def test_content_outside_example(self):
        with self.assertRaises(GwfFormatError):
            parse_gwf("edges:\n0 1\n")
        with self.assertRaises(GwfFormatError):
            parse_gwf("# Example 1\nedges:\n0 1\nend\n1 2\n")

    def test_duplicate_example_number(self):
        with self.assertRaises(GwfFormatError):
            parse_gwf("# Example 1\nedges:\n0 1\nend\n# Example 1\nedges:\n1 2\nend\n")

    def test_non_integer_example_number(self):
        with self.assertRaises(GwfFormatError):
            parse_gwf("# Example one\nedges:\n0 1\nend\n")


class TestGwfSource(unittest.TestCase):

    def setUp(self):
        self.source = GwfSource.from_text(SAMPLE)

    def test_numbers(self):
        self.assertEqual(self.source.numbers(), [1, 2, 7])

    def test_example_can_be_read_repeatedly(self):
        first = self.source.example(2)
        first.edges.append((9, 9))
        again = self.source.example(2)
        self.assertEqual(again.edges, [(3, 4), (0, 3)])

    def test_out_of_order_access(self):
        self.assertEqual(self.source.example(2).number, 2)
        self.assertEqual(self.source.example(1).number, 1)

    def test_missing_example(self):
        with self.assertRaises(EmptyGraph) as ctx:
            self.source.example(4)
        self.assertEqual(ctx.exception.example_number, 4)
        self.assertIn("No edges found for example 4", str(ctx.exception))

    def test_example_without_edges(self):
        with self.assertRaises(EmptyGraph):
            self.source.example(7)

    def test_from_file(self):
        fd, path = tempfile.mkstemp(suffix=".gwf")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(SAMPLE)
            source = GwfSource.from_file(path)
            self.assertEqual(source.path, path)
            self.assertEqual(source.example(1).edges, [(0, 1), (1, 2)])
        finally:
            os.remove(path)

    def test_repr(self):
        self.assertIn("number=5", repr(GwfExample(5, edges=[(0, 1)])))


if __name__ == '__main__':
    unittest.main()
