"""
lngraph/models/schemas/graph.py

Schemas for a payment-channel graph snapshot.

Wire shape
----------
  {"nodes": [Node, ...], "edges": [Edge, ...]}

Field declaration order follows the wire order, so validation reports
errors in the order they appear in a document.  Keys not declared here
are ignored.  No referential checks are made: an edge's node1_pub /
node2_pub need not appear in nodes, and pub_key / channel_id need not be
unique.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from lngraph.models.schemas.fields import U16, U32, StrU32, StrU64
from lngraph.models.schemas.socket_addr import SocketAddr

_SCHEMA_CONFIG = ConfigDict(frozen=True, extra="ignore")


class Address(BaseModel):
    """A network endpoint a node can be reached on."""
    model_config = _SCHEMA_CONFIG

    network: StrictStr = Field(..., description="Transport family, e.g. 'tcp'")
    addr: SocketAddr


class Node(BaseModel):
    """A participant in the routing network."""
    model_config = _SCHEMA_CONFIG

    last_update: U32
    pub_key: StrictStr
    alias: StrictStr
    addresses: tuple[Address, ...]
    color: StrictStr = Field(..., description="Expected as '#RRGGBB', not validated")


class NodePolicy(BaseModel):
    """One endpoint's forwarding terms for a channel."""
    model_config = _SCHEMA_CONFIG

    time_lock_delta: U16
    min_htlc: StrU64
    fee_base_msat: StrU64
    fee_rate_milli_msat: StrU64
    disabled: StrictBool
    max_htlc_msat: StrU64
    last_update: U32


class Edge(BaseModel):
    """A payment channel between two nodes."""
    model_config = _SCHEMA_CONFIG

    channel_id: StrictStr
    chan_point: StrictStr = Field(..., description="Funding outpoint, '<txid>:<index>'")
    last_update: U32
    node1_pub: StrictStr
    node2_pub: StrictStr
    capacity: StrU32
    node1_policy: NodePolicy | None = None
    node2_policy: NodePolicy | None = None


class Graph(BaseModel):
    """Root snapshot: every node and channel, in document order."""
    model_config = _SCHEMA_CONFIG

    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]
