import streamlit as st

from graph_radius import config
from graph_radius.errors import GraphError, GwfFormatError
from graph_radius.gwf import GwfSource
from graph_radius.report import analyze_example, matrix_to_frame, plot_graph

# --- Configuration & Data Loading ---
@st.cache_data # Cache file parsing
def load_source(path):
    """Parses the GWF file once per path."""
    try:
        return GwfSource.from_file(path), None
    except FileNotFoundError:
        return None, f"Error: GWF file ({path}) not found."
    except GwfFormatError as e:
        return None, f"Error: {path} is not a valid GWF file: {e}"

# --- Main App Logic ---
st.title("Graph Radius Explorer")

st.sidebar.header("Input")
gwf_path = st.sidebar.text_input("GWF file", value=config.DEFAULT_GWF_FILE)
source, load_error = load_source(gwf_path)

if load_error:
    st.error(load_error)
    st.stop()

numbers = source.numbers()
if not numbers:
    st.warning("The file contains no examples.")
    st.stop()

number = st.sidebar.selectbox("Example", options=numbers)
vertex_override = st.sidebar.number_input("Vertex count (0 = as declared)", min_value=0, value=0, step=1)
deduplicate = st.sidebar.checkbox("Emit each radius-graph pair once", value=False)

try:
    example = source.example(number)
    result = analyze_example(
        example,
        vertex_count=int(vertex_override) or None,
        deduplicate=deduplicate,
    )
except GraphError as e:
    st.error(f"Example {number}: {e}")
    st.stop()

metrics = result.metrics
st.subheader(f"Example {number}")
col_radius, col_diameter, col_center = st.columns(3)
col_radius.metric("Radius", metrics.radius)
col_diameter.metric("Diameter", metrics.diameter)
col_center.metric("Central vertices", ", ".join(str(v) for v in metrics.central_vertices))

st.write("Eccentricities:")
st.write({f"v{vertex}": value for vertex, value in enumerate(metrics.eccentricities)})

left, right = st.columns(2)
with left:
    st.markdown("**Original graph**")
    st.pyplot(plot_graph(result.store, metrics.central_vertices))
    st.dataframe(matrix_to_frame(result.store.matrix(), result.store.vertex_count))
with right:
    st.markdown(f"**Radius graph (distance <= {metrics.radius})**")
    st.pyplot(plot_graph(result.radius_graph, metrics.central_vertices))
    st.dataframe(matrix_to_frame(result.radius_graph.matrix(), result.radius_graph.vertex_count))

st.sidebar.markdown("---")
st.sidebar.markdown(f"{len(numbers)} examples in {gwf_path}")

# To run: streamlit run app.py
