"""
Tests for replication group validation.

Rules run in a fixed order and the first violated rule is reported.
"""

import pytest

from infra_cache.lib.elasticache import ConfigurationError, resolve_topology, validate_replication_group
from infra_cache.lib.kms import KeyReference

KEY = KeyReference.from_key_arn("arn:aws:kms:us-test-1:12345:key/abcd")


def validate(props):
    validate_replication_group(props, resolve_topology(props))


class TestValidDescriptions:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"multi_az_enabled": True},
            {"cluster_mode_enabled": True},
            {"cluster_mode_enabled": True, "multi_az_enabled": True, "num_node_groups": 3},
            {"multi_az_enabled": True, "replicas_per_node_group": 2, "automatic_failover_enabled": True},
            {"num_cache_clusters": 2},
            {"encryption_key": KEY},
            {"at_rest_encrypted": True, "encryption_key": KEY},
            {"at_rest_encrypted": False},
            {"multi_az_enabled": False, "automatic_failover_enabled": False},
        ],
    )
    def test_passes(self, make_props, kwargs):
        validate(make_props(**kwargs))


class TestTopologyRules:
    def test_cache_clusters_with_node_groups(self, make_props):
        with pytest.raises(ConfigurationError, match="mutually exclusive topology fields"):
            validate(make_props(num_cache_clusters=2, num_node_groups=1))

    def test_cache_clusters_with_replicas(self, make_props):
        with pytest.raises(ConfigurationError, match="mutually exclusive topology fields"):
            validate(make_props(num_cache_clusters=2, replicas_per_node_group=0))

    def test_cluster_mode_without_multi_az(self, make_props):
        with pytest.raises(ConfigurationError, match="multi-AZ required under cluster mode"):
            validate(make_props(cluster_mode_enabled=True, multi_az_enabled=False))

    def test_cluster_mode_with_one_node_group(self, make_props):
        with pytest.raises(ConfigurationError, match="cluster mode requires more than one node group"):
            validate(make_props(cluster_mode_enabled=True, num_node_groups=1))

    @pytest.mark.parametrize("num_node_groups", [0, -1])
    def test_cluster_mode_with_fewer_node_groups(self, make_props, num_node_groups):
        message = f"cluster mode requires more than one node group: num_node_groups is {num_node_groups}"
        with pytest.raises(ConfigurationError, match=message):
            validate(make_props(cluster_mode_enabled=True, num_node_groups=num_node_groups))

    def test_cluster_mode_without_failover(self, make_props):
        with pytest.raises(ConfigurationError, match="automatic failover required under cluster mode"):
            validate(make_props(cluster_mode_enabled=True, automatic_failover_enabled=False))

    def test_multi_az_without_failover(self, make_props):
        with pytest.raises(ConfigurationError, match="automatic failover required under multi-AZ"):
            validate(make_props(multi_az_enabled=True, automatic_failover_enabled=False))

    def test_multi_az_without_replicas(self, make_props):
        with pytest.raises(ConfigurationError, match="at least one replica required under multi-AZ"):
            validate(make_props(multi_az_enabled=True, replicas_per_node_group=0))


class TestEncryptionRules:
    def test_key_without_encryption(self, make_props):
        with pytest.raises(ConfigurationError, match="encryption key requires encryption enabled"):
            validate(make_props(at_rest_encrypted=False, encryption_key=KEY))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cluster_mode_enabled": True},
            {"multi_az_enabled": True, "replicas_per_node_group": 3},
            {"num_cache_clusters": 3},
        ],
    )
    def test_key_without_encryption_regardless_of_topology(self, make_props, kwargs):
        with pytest.raises(ConfigurationError, match="encryption key requires encryption enabled"):
            validate(make_props(at_rest_encrypted=False, encryption_key=KEY, **kwargs))


class TestRuleOrder:
    """When several rules are violated the earliest one is reported."""

    def test_exclusive_fields_before_cluster_mode(self, make_props):
        with pytest.raises(ConfigurationError, match="mutually exclusive topology fields"):
            validate(
                make_props(num_cache_clusters=2, num_node_groups=1, cluster_mode_enabled=True, multi_az_enabled=False)
            )

    def test_multi_az_before_node_groups(self, make_props):
        with pytest.raises(ConfigurationError, match="multi-AZ required under cluster mode"):
            validate(make_props(cluster_mode_enabled=True, multi_az_enabled=False, num_node_groups=1))

    def test_node_groups_before_cluster_failover(self, make_props):
        with pytest.raises(ConfigurationError, match="cluster mode requires more than one node group"):
            validate(make_props(cluster_mode_enabled=True, num_node_groups=1, automatic_failover_enabled=False))

    def test_cluster_failover_before_multi_az_failover(self, make_props):
        with pytest.raises(ConfigurationError, match="automatic failover required under cluster mode"):
            validate(make_props(cluster_mode_enabled=True, multi_az_enabled=True, automatic_failover_enabled=False))

    def test_topology_before_encryption(self, make_props):
        with pytest.raises(ConfigurationError, match="at least one replica required under multi-AZ"):
            validate(
                make_props(multi_az_enabled=True, replicas_per_node_group=0, at_rest_encrypted=False, encryption_key=KEY)
            )


class TestDuckTyping:
    def test_module_config_can_be_validated(self):
        """Anything with the right attributes validates, including the stack module config."""
        from infra_cache.modules.aws.elasticache import ReplicationGroupConfig

        config = ReplicationGroupConfig(name="sessions", cluster_mode_enabled=True, num_node_groups=1)

        with pytest.raises(ConfigurationError, match="cluster mode requires more than one node group"):
            validate(config)
