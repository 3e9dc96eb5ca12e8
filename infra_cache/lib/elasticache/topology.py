from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResolvedTopology:
    num_node_groups: int
    replicas_per_node_group: int
    automatic_failover_enabled: bool
    multi_az_enabled: Optional[bool]


def resolve_topology(props) -> ResolvedTopology:
    """Fill in the topology defaults of a replication group description

    Never raises, contradictions are left to ``validate_replication_group``. An explicit value is always kept, zero
    included.

    :param props: Anything with the replication group topology attributes
    :return: The resolved topology
    """
    cluster_mode_enabled = bool(props.cluster_mode_enabled)
    multi_az_enabled = bool(props.multi_az_enabled)

    if props.num_node_groups is not None:
        num_node_groups = props.num_node_groups
    else:
        num_node_groups = 2 if cluster_mode_enabled else 1

    if props.replicas_per_node_group is not None:
        replicas_per_node_group = props.replicas_per_node_group
    else:
        replicas_per_node_group = 1 if multi_az_enabled else 0

    if props.automatic_failover_enabled is not None:
        automatic_failover_enabled = props.automatic_failover_enabled
    else:
        automatic_failover_enabled = cluster_mode_enabled or multi_az_enabled

    return ResolvedTopology(
        num_node_groups=num_node_groups,
        replicas_per_node_group=replicas_per_node_group,
        automatic_failover_enabled=automatic_failover_enabled,
        multi_az_enabled=props.multi_az_enabled,
    )
