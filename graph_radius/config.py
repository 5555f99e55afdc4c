# Default input: GWF file in the working directory
DEFAULT_GWF_FILE = "graph.gwf"

# Vertex count used when an example declares no vertices
DEFAULT_VERTEX_COUNT = 5

# Examples analyzed when none are requested
DEFAULT_EXAMPLES = (1, 2, 3, 4, 5)

# Printed after every example report
SEPARATOR = "-" * 32

# Node colors for plot_graph()
NODE_COLOR = "#9ecae1"
CENTER_COLOR = "#e6550d"
