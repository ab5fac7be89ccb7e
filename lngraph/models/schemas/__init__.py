from lngraph.models.schemas.graph import Address, Edge, Graph, Node, NodePolicy
from lngraph.models.schemas.socket_addr import SocketAddr

__all__ = [
    "Address",
    "Edge",
    "Graph",
    "Node",
    "NodePolicy",
    "SocketAddr",
]
