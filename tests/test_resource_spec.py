"""
Tests for building the replication group resource spec from a validated description.
"""

import pytest

from infra_cache.lib.elasticache import (
    EngineVersion,
    InstanceClass,
    InstanceSize,
    InstanceType,
    ParameterGroup,
    build_resource_spec,
    cache_node_type,
    resolve_encryption,
    resolve_topology,
)
from infra_cache.lib.kms import KeyReference
from infra_cache.lib.lifecycle import RemovalPolicy

KEY_ARN = "arn:aws:kms:us-test-1:12345:key/abcd"


@pytest.fixture
def build(make_props):
    def _build(**kwargs):
        props = make_props(**kwargs)
        return build_resource_spec(
            "rg",
            props,
            resolve_topology(props),
            resolve_encryption(props),
            security_group_ids=["sg-1"],
            subnet_group_name="rg-subnets",
        )

    return _build


class TestScenarios:
    def test_no_overrides(self, build):
        spec = build()

        assert spec.num_node_groups == 1
        assert spec.replicas_per_node_group == 0
        assert spec.automatic_failover_enabled is False
        assert spec.at_rest_encryption_enabled is True
        assert spec.engine == "redis"
        assert spec.node_type == "cache.t3.micro"
        assert spec.description == "rg replication group"

    def test_multi_az(self, build):
        spec = build(multi_az_enabled=True)

        assert spec.num_node_groups == 1
        assert spec.replicas_per_node_group == 1
        assert spec.automatic_failover_enabled is True
        assert spec.multi_az_enabled is True

    def test_cluster_mode(self, build):
        spec = build(cluster_mode_enabled=True)

        assert spec.num_node_groups == 2
        assert spec.automatic_failover_enabled is True


class TestDerivedFields:
    def test_node_type_gets_cache_prefix(self, build):
        spec = build(node_type=InstanceType.of(InstanceClass.R6G, InstanceSize.LARGE))

        assert spec.node_type == "cache.r6g.large"

    def test_cache_node_type(self):
        assert cache_node_type(InstanceType("m5.xlarge")) == "cache.m5.xlarge"

    def test_description_is_kept(self, build):
        assert build(description="sessions").description == "sessions"

    def test_engine_version_value(self, build):
        assert build(engine_version=EngineVersion.REDIS_5_0_6).engine_version == "5.0.6"

    def test_network_references_are_verbatim(self, build):
        spec = build()

        assert spec.security_group_ids == ["sg-1"]
        assert spec.subnet_group_name == "rg-subnets"

    def test_parameter_group_name(self, build):
        spec = build(parameter_group=ParameterGroup.from_parameter_group_name("default.redis6.x"))

        assert spec.parameter_group_name == "default.redis6.x"

    def test_pass_through_fields(self, build):
        spec = build(
            port=6380,
            preferred_maintenance_window="sun:23:45-mon:00:15",
            snapshot_window="05:00-09:00",
            snapshot_retention_limit=7,
            replication_group_name="sessions",
        )

        assert spec.port == 6380
        assert spec.maintenance_window == "sun:23:45-mon:00:15"
        assert spec.snapshot_window == "05:00-09:00"
        assert spec.snapshot_retention_limit == 7
        assert spec.replication_group_id == "sessions"


class TestEncryption:
    def test_key_is_omitted_without_reference(self, build):
        spec = build()

        assert spec.kms_key_id is None
        assert "kms_key_id" not in spec.to_resource_args()

    def test_key_arn_is_used(self, build):
        spec = build(encryption_key=KeyReference.from_key_arn(KEY_ARN))

        assert spec.kms_key_id == KEY_ARN
        assert spec.at_rest_encryption_enabled is True

    def test_encryption_can_be_disabled(self, build):
        assert build(at_rest_encrypted=False).at_rest_encryption_enabled is False


class TestCacheClusters:
    def test_cache_clusters_replace_node_groups(self, build):
        spec = build(num_cache_clusters=3)

        assert spec.num_cache_clusters == 3
        assert spec.num_node_groups is None
        assert spec.replicas_per_node_group is None


class TestRemovalPolicy:
    def test_snapshot_requests_final_snapshot(self, build):
        assert build(removal_policy=RemovalPolicy.SNAPSHOT).final_snapshot_identifier == "rg-final-snapshot"

    @pytest.mark.parametrize("policy", [None, RemovalPolicy.DESTROY, RemovalPolicy.RETAIN])
    def test_no_final_snapshot_otherwise(self, build, policy):
        assert build(removal_policy=policy).final_snapshot_identifier is None


class TestResourceArgs:
    def test_unset_fields_are_dropped(self, build):
        args = build().to_resource_args()

        assert args == {
            "description": "rg replication group",
            "engine": "redis",
            "node_type": "cache.t3.micro",
            "automatic_failover_enabled": False,
            "at_rest_encryption_enabled": True,
            "security_group_ids": ["sg-1"],
            "subnet_group_name": "rg-subnets",
            "num_node_groups": 1,
            "replicas_per_node_group": 0,
        }

    def test_false_values_are_kept(self, build):
        args = build(multi_az_enabled=False).to_resource_args()

        assert args["multi_az_enabled"] is False

    def test_spec_is_immutable(self, build):
        spec = build()

        with pytest.raises(AttributeError):
            spec.num_node_groups = 3
