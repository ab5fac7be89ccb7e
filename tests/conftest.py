"""
tests/conftest.py

Shared sample documents for the codec and schema tests.

The sample is a one-node, one-edge snapshot in the shape produced by
`lncli describegraph`: large integers quoted, one policy null.
"""
from __future__ import annotations

import copy
import json
from typing import Any

import pytest

NODE_PUB = "0200424bd89b5282c310e10a52fd783070556f947b54d93f73fd89534ce0cba708"
NODE1_PUB = "02899d09a65c5ca768c42b12e57d0497bfdf8ac1c46b0dcc0d4faefcdbc01304c1"
NODE2_PUB = "0298f6074a454a1f5345cb2a7c6f9fce206cd0bf675d177cdbf0ca7508dd28852f"
CHAN_POINT = "ae07c9fe78e6a1057902441f599246d735bac33be7b159667006757609fb5a86:1"

SAMPLE_GRAPH: dict[str, Any] = {
    "nodes": [
        {
            "last_update": 1567764428,
            "pub_key": NODE_PUB,
            "alias": "WHENBTC",
            "addresses": [{"network": "tcp", "addr": "67.166.1.116:9735"}],
            "color": "#3399ff",
        }
    ],
    "edges": [
        {
            "channel_id": "659379322247708673",
            "chan_point": CHAN_POINT,
            "last_update": 1571278793,
            "node1_pub": NODE1_PUB,
            "node2_pub": NODE2_PUB,
            "capacity": "1000000",
            "node1_policy": None,
            "node2_policy": {
                "time_lock_delta": 14,
                "min_htlc": "1000",
                "fee_base_msat": "1000",
                "fee_rate_milli_msat": "1",
                "disabled": False,
                "max_htlc_msat": "990000000",
                "last_update": 1571278793,
            },
        }
    ],
}


@pytest.fixture()
def sample_doc() -> dict[str, Any]:
    """A deep copy of SAMPLE_GRAPH that a test may mutate freely."""
    return copy.deepcopy(SAMPLE_GRAPH)


@pytest.fixture()
def sample_text() -> str:
    return json.dumps(SAMPLE_GRAPH)
