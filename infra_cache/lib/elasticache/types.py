from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

from pulumi import Input

from infra_cache.lib.kms import KeyReference
from infra_cache.lib.lifecycle import RemovalPolicy
from infra_cache.lib.network import SecurityGroup, SubnetSelection, Vpc

if TYPE_CHECKING:
    from .parameter_group import ParameterGroup
    from .subnet_group import SubnetGroup


class EngineVersion(Enum):
    """
    Redis engine versions a replication group can run.
    See `aws elasticache describe-cache-engine-versions` for the full list.
    """

    REDIS_5_0_5 = "5.0.5"
    REDIS_5_0_6 = "5.0.6"
    REDIS_6_X = "6.x"


class InstanceClass(Enum):
    T3 = "t3"
    T4G = "t4g"
    M5 = "m5"
    M6G = "m6g"
    R5 = "r5"
    R6G = "r6g"


class InstanceSize(Enum):
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    XLARGE2 = "2xlarge"
    XLARGE4 = "4xlarge"


@dataclass(frozen=True)
class InstanceType:
    """An EC2-style instance type, e.g. `t3.micro`. Cache nodes add the `cache.` prefix themselves."""

    identifier: str

    @classmethod
    def of(cls, instance_class: InstanceClass, instance_size: InstanceSize) -> "InstanceType":
        return cls(f"{instance_class.value}.{instance_size.value}")

    def __str__(self) -> str:
        return self.identifier


@dataclass
class ReplicationGroupProps:
    vpc: Vpc
    """The VPC to place the replication group in"""

    replication_group_name: Optional[str] = None
    """Identifier for the replication group. Generated by the provider when unset."""

    description: Optional[str] = None
    """Defaults to a description naming the replication group"""

    engine_version: Optional[EngineVersion] = None
    """Redis version, the provider picks one when unset"""

    parameter_group: Optional["ParameterGroup"] = None
    """Engine parameters, none when unset"""

    num_node_groups: Optional[int] = None
    """Number of node groups (shards). Defaults to 2 with cluster mode enabled, 1 otherwise."""

    num_cache_clusters: Optional[int] = None
    """Number of cache clusters. Cannot be combined with `num_node_groups` or `replicas_per_node_group`."""

    replicas_per_node_group: Optional[int] = None
    """Replica nodes per node group, 0 to 5. Defaults to 1 with Multi-AZ enabled, 0 otherwise."""

    multi_az_enabled: Optional[bool] = None
    """Spread replicas across AZs. Requires automatic failover and at least one replica."""

    automatic_failover_enabled: Optional[bool] = None
    """Promote a replica when the primary fails. Defaults to true with cluster mode or Multi-AZ enabled."""

    cluster_mode_enabled: Optional[bool] = None
    """Shard the key space across node groups. Requires Multi-AZ, automatic failover and 2+ node groups."""

    node_type: Optional[InstanceType] = None
    """Defaults to t3.micro, provisioned as cache.t3.micro"""

    port: Optional[int] = None
    """Port to listen on, the engine default when unset"""

    at_rest_encrypted: Optional[bool] = None
    """Encrypt data at rest, defaults to true"""

    encryption_key: Optional[KeyReference] = None
    """KMS key for encryption at rest. The AWS managed key is used when unset."""

    transit_encryption_enabled: Optional[bool] = None
    """Enable TLS between clients and nodes"""

    auth_token: Optional[Input[str]] = None
    """Password for AUTH, only accepted with transit encryption enabled"""

    preferred_maintenance_window: Optional[str] = None
    """Weekly maintenance window as ddd:hh24:mi-ddd:hh24:mi in UTC, e.g. sun:23:45-mon:00:15"""

    snapshot_window: Optional[str] = None
    """Daily snapshot window in UTC, e.g. 05:00-09:00"""

    snapshot_retention_limit: Optional[int] = None
    """Days to keep automatic snapshots"""

    vpc_subnets: Optional[SubnetSelection] = None
    """Where to place the nodes, private subnets when unset"""

    security_groups: Optional[list[SecurityGroup]] = None
    """Security groups to attach. A new security group is created when unset."""

    subnet_group: Optional["SubnetGroup"] = None
    """Subnet group to use. A new subnet group is created when unset."""

    removal_policy: Optional[RemovalPolicy] = None
    """Applied to the replication group and every resource created for it, DESTROY when unset"""

    publicly_accessible: Optional[bool] = None
    """ElastiCache has no public endpoints, setting this only logs a warning"""

    tags: Optional[dict] = None
    """Tags for every resource created for the replication group"""


@dataclass
class ReplicationGroupAttributes:
    replication_group_id: str
    """Identifier of the replication group"""

    primary_endpoint_address: str
    """Read-write endpoint address"""

    primary_endpoint_port: int
    """Read-write endpoint port"""

    reader_endpoint_address: str
    """Read-only endpoint address"""

    reader_endpoint_port: int
    """Read-only endpoint port"""

    security_groups: list[SecurityGroup] = field(default_factory=list)
    """Security groups of the replication group, none when unset"""
