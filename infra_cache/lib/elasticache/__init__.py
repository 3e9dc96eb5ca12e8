from .encryption import EncryptionConfig, resolve_encryption
from .endpoint import Endpoint
from .errors import ConfigurationError, ReferenceIntegrityError
from .parameter_group import CacheParameterGroupFamily, ParameterGroup
from .replication_group import IReplicationGroup, ImportedReplicationGroup, ReplicationGroup
from .resource_spec import ResourceSpec, build_resource_spec, cache_node_type
from .subnet_group import SubnetGroup
from .topology import ResolvedTopology, resolve_topology
from .types import (
    EngineVersion,
    InstanceClass,
    InstanceSize,
    InstanceType,
    ReplicationGroupAttributes,
    ReplicationGroupProps,
)
from .validation import validate_replication_group
