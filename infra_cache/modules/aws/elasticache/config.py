from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output

from infra_cache.lib.elasticache import EngineVersion
from infra_cache.lib.lifecycle import RemovalPolicy


@dataclass
class ParameterConfig:
    name: str
    """The name of the Elasticache parameter."""

    value: str
    """The value of the Elasticache parameter."""


@dataclass
class ReplicationGroupConfig:
    name: str
    """Replication Group name, prefixed with the stack name."""

    engine_version: EngineVersion = EngineVersion.REDIS_6_X
    """
    Supported engine version.
    See: https://docs.aws.amazon.com/AmazonElastiCache/latest/red-ug/supported-engine-versions.html
    """

    node_type: str = "t3.micro"
    """Instance type without the `cache.` prefix. See: https://aws.amazon.com/elasticache/pricing/"""

    cluster_mode_enabled: Optional[bool] = None
    """Shard the key space. Requires multi-AZ, automatic failover and at least 2 node groups."""

    multi_az_enabled: Optional[bool] = None
    """Spread replicas across AZs. Requires automatic failover and at least one replica."""

    automatic_failover_enabled: Optional[bool] = None
    """Defaults to true with cluster mode or multi-AZ enabled."""

    num_node_groups: Optional[int] = None
    """Number of node groups or 'shards'. Defaults to 2 with cluster mode, 1 otherwise."""

    replicas_per_node_group: Optional[int] = None
    """Number of replicas (doesn't count master) nodes per node group."""

    num_cache_clusters: Optional[int] = None
    """Number of cache clusters. Mutually exclusive with `num_node_groups` and `replicas_per_node_group`."""

    at_rest_encrypted: Optional[bool] = None
    """Encrypt data at rest, on by default."""

    encryption_key: Optional[str] = None
    """ARN of the KMS key used for encryption at rest. The AWS managed key when unset."""

    transit_encryption_enabled: bool = False
    """Whether to enable encryption in transit. Generates an AUTH token stored in SSM."""

    port: int = 6379
    """Port the nodes listen on."""

    preferred_maintenance_window: Optional[str] = "sat:09:00-sat:10:00"
    """Weekly maintenance window in UTC."""

    snapshot_window: Optional[str] = None
    """Daily snapshot window in UTC, e.g. 05:00-09:00."""

    snapshot_retention_limit: Optional[int] = None
    """Days to keep automatic snapshots."""

    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
    """What happens to the replication group when it is removed: destroy, retain or snapshot."""

    rg_params: Optional[list[ParameterConfig]] = field(default_factory=list)
    """List of cluster configuration options."""


@dataclass
class ReplicationGroups:
    replication_groups: list[ReplicationGroupConfig]
    """List of Replication Group specifications."""


@dataclass
class ElasticacheExports:
    id: Output[str]
    """The provider-assigned unique ID for this managed resource."""

    primary_endpoint_address: Output[str]
    """Read/write endpoint. The configuration endpoint in cluster mode."""

    reader_endpoint_address: Output[str]
    """Read-only endpoint, load balanced across replicas."""

    port: Output[int]
    """Port of both endpoints."""

    auth_token: Optional[Output[str]] = None
    """
    The password used to access a password protected server.
    Only set when ``transit_encryption_enabled = true``
    """
