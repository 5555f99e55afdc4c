import matplotlib
matplotlib.use("Agg")

import pytest
from graph_radius.incidence import IncidenceStore


@pytest.fixture
def path_graph():
    # 0 - 1 - 2 - 3 - 4
    return IncidenceStore.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def star_graph():
    # center 0, leaves 1..4
    return IncidenceStore.from_edges(5, [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def single_edge_graph():
    return IncidenceStore.from_edges(2, [(0, 1)])


@pytest.fixture
def cycle_graph():
    return IncidenceStore.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


@pytest.fixture
def gwf_text():
    return """# Example 1
vertices:
0
1
2
3
4
edges:
0 1
1 2
2 3
3 4
end

# Example 2
edges:
0 1
0 2
0 3
0 4
end

# Example 3
vertices:
0
1
2
edges:
end

# Example 4
edges:
0 1
end
"""
