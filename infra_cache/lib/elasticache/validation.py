from .errors import ConfigurationError
from .topology import ResolvedTopology


def _validate_node_count(props, topology: ResolvedTopology) -> None:
    if props.num_cache_clusters is not None and (
        props.num_node_groups is not None or props.replicas_per_node_group is not None
    ):
        raise ConfigurationError(
            "mutually exclusive topology fields: num_cache_clusters cannot be set together with "
            "num_node_groups or replicas_per_node_group"
        )

    if props.cluster_mode_enabled:
        if props.multi_az_enabled is False:
            raise ConfigurationError("multi-AZ required under cluster mode: multi_az_enabled must not be false")
        if topology.num_node_groups < 2:
            raise ConfigurationError(
                f"cluster mode requires more than one node group: num_node_groups is {topology.num_node_groups}"
            )
        if props.automatic_failover_enabled is False:
            raise ConfigurationError(
                "automatic failover required under cluster mode: automatic_failover_enabled must not be false"
            )

    if props.multi_az_enabled:
        if props.automatic_failover_enabled is False:
            raise ConfigurationError(
                "automatic failover required under multi-AZ: automatic_failover_enabled must not be false"
            )
        if props.replicas_per_node_group is not None and props.replicas_per_node_group < 1:
            raise ConfigurationError(
                f"at least one replica required under multi-AZ: replicas_per_node_group is "
                f"{props.replicas_per_node_group}"
            )


def _validate_encryption(props) -> None:
    if props.at_rest_encrypted is False and props.encryption_key is not None:
        raise ConfigurationError("encryption key requires encryption enabled: at_rest_encrypted is false")


def validate_replication_group(props, topology: ResolvedTopology) -> None:
    """Reject replication group descriptions the provider would accept but ElastiCache would not honor

    Checks run in a fixed order and the first failure wins, so the same description always yields the same message.
    Defaults never violate a rule. The node group count is read from ``topology``, which keeps an explicit
    value as given, so any explicit count below 2 fails under cluster mode.

    :param props: Anything with the replication group topology and encryption attributes
    :param topology: The topology resolved from ``props``
    :raises ConfigurationError: naming the violated rule
    """
    _validate_node_count(props, topology)
    _validate_encryption(props)
