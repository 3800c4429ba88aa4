"""Node configuration read from a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from datetime import timedelta
from os import PathLike

from .key import Key, key_from_string

DEBUG = True
BUILD_VERSION = "v0.18.21"
KERNEL_NETWORK_ID = "74c6cdb7d51af57037faa1f5544f8331ced001df5964331911ca51385993b375"

SNAPSHOT_ROUND_GAP = timedelta(seconds=3)
SNAPSHOT_REFERENCE_THRESHOLD = 10
SNAPSHOT_SYNC_ROUND_THRESHOLD = 100
SNAPSHOT_ROUND_SIZE = 200
CHECKPOINT_DURATION = timedelta(minutes=10)
CHECKPOINT_PUNISHMENT_GRADE = 7
TRANSACTION_MAXIMUM_SIZE = 1024 * 1024 * 4
WITHDRAWAL_CLAIM_FEE = "0.0001"
GOSSIP_SIZE = 3
KERNEL_MINIMUM_NODES_COUNT = 7
KERNEL_MINT_TIME_BEGIN = 7
KERNEL_MINT_TIME_END = 9
KERNEL_NODE_ACCEPT_TIME_BEGIN = 13
KERNEL_NODE_ACCEPT_TIME_END = 19
KERNEL_NODE_PLEDGE_PERIOD_MINIMUM = timedelta(hours=12)
KERNEL_NODE_ACCEPT_PERIOD_MINIMUM = timedelta(hours=12)
KERNEL_NODE_ACCEPT_PERIOD_MAXIMUM = timedelta(days=7)


@dataclass
class NodeConfig:
    signer: Key = field(default_factory=Key)
    signer_str: str = ""
    kernel_operation_period: int = 0
    memory_cache_size: int = 0
    cache_ttl: int = 0


@dataclass
class StorageConfig:
    value_log_gc: bool = False
    max_compaction_levels: int = 0


@dataclass
class P2PConfig:
    port: int = 0
    seeds: list[str] = field(default_factory=list)
    relayer: bool = False
    metric: bool = False


@dataclass
class RPCConfig:
    port: int = 0
    runtime: bool = False
    object_server: bool = False


@dataclass
class DevConfig:
    port: int = 0


@dataclass
class Custom:
    node: NodeConfig = field(default_factory=NodeConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    p2p: P2PConfig = field(default_factory=P2PConfig)
    rpc: RPCConfig = field(default_factory=RPCConfig)
    dev: DevConfig = field(default_factory=DevConfig)


def _section(cls, table, renames=None):
    """Build a section from its TOML table, ignoring unknown keys."""
    if not isinstance(table, dict):
        raise ValueError(f"{cls.__name__} must be a table")
    names = {f.name for f in fields(cls)}
    values = {}
    for key, value in table.items():
        name = (renames or {}).get(key, key.replace("-", "_"))
        if name in names:
            values[name] = value
    return cls(**values)


def initialize(file: str | PathLike[str]) -> Custom:
    """Read a configuration file, parse the signer key and fill defaults."""
    with open(file, "rb") as handle:
        data = tomllib.load(handle)
    node = _section(NodeConfig, data.get("node", {}), {"signer-key": "signer_str", "signer": ""})
    node.signer = key_from_string(node.signer_str)
    node.kernel_operation_period = node.kernel_operation_period or 700
    node.memory_cache_size = node.memory_cache_size or 1024 * 4
    node.cache_ttl = node.cache_ttl or 3600 * 2
    return Custom(
        node=node,
        storage=_section(StorageConfig, data.get("storage", {})),
        p2p=_section(P2PConfig, data.get("p2p", {})),
        rpc=_section(RPCConfig, data.get("rpc", {})),
        dev=_section(DevConfig, data.get("dev", {})),
    )