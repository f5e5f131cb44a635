"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from islandgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_node("A", population=1000)
    >>> G.add_edge("A", "B", travel_cost=10, activity_cost=5)
    >>> network = from_networkx(G)
    >>> network.edges_of("A")[0].total_cost
    15
    >>> G_out = to_networkx(network)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Union

from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import Cost, NodeId
from islandgraph.types.dto import Edge

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    travel_attr: str = "travel_cost",
    activity_attr: str = "activity_cost",
    population_attr: str = "population",
    default_travel_cost: Cost = 0,
    default_activity_cost: Cost = 0,
) -> IslandNetwork:
    """Build an ``IslandNetwork`` from a NetworkX graph.

    Every graph node is registered, in NetworkX node order, with its outgoing
    edges in NetworkX edge order. Undirected graphs go through
    ``to_directed()`` first, giving one edge per direction.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        travel_attr: Edge attribute holding the travel cost.
        activity_attr: Edge attribute holding the activity cost.
        population_attr: Node attribute holding the population (optional).
        default_travel_cost: Travel cost when the attribute is missing.
        default_activity_cost: Activity cost when the attribute is missing.

    Returns:
        A new IslandNetwork.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if not G.is_directed():
        G = G.to_directed()

    edges: Dict[NodeId, List[Edge]] = {node: [] for node in G.nodes()}
    for u, v, data in G.edges(data=True):
        edges[u].append(
            Edge(
                target=v,
                travel_cost=data.get(travel_attr, default_travel_cost),
                activity_cost=data.get(activity_attr, default_activity_cost),
            )
        )

    network = IslandNetwork()
    for node, attrs in G.nodes(data=True):
        network.register(node, edges[node], attrs.get(population_attr))
    return network


def to_networkx(
    network: IslandNetwork,
    *,
    travel_attr: str = "travel_cost",
    activity_attr: str = "activity_cost",
    population_attr: str = "population",
) -> "nx.MultiDiGraph":
    """Convert an ``IslandNetwork`` to a NetworkX MultiDiGraph.

    Registered islands keep their population as a node attribute; edge
    targets that were never registered become attribute-less nodes. Parallel
    edges are preserved.
    """
    import networkx as nx

    G = nx.MultiDiGraph()
    for node in network.nodes:
        population = network.population(node)
        if population is not None:
            G.add_node(node, **{population_attr: population})
        else:
            G.add_node(node)

    for node in network.nodes:
        for edge in network.edges_of(node):
            G.add_edge(
                node,
                edge.target,
                **{
                    travel_attr: edge.travel_cost,
                    activity_attr: edge.activity_cost,
                },
            )
    return G
