"""
Tests for the elasticache stack module, with the SysEnv lookups stubbed out.
"""

from types import SimpleNamespace

import pulumi
import pytest

from infra_cache.lib.elasticache import ConfigurationError
from infra_cache.modules.aws.elasticache import (
    Elasticache,
    ReplicationGroupConfig,
    ReplicationGroups,
)
from infra_cache.modules.aws.elasticache import elasticache as elasticache_module


@pytest.fixture(autouse=True)
def sysenv(monkeypatch, vpc):
    monkeypatch.setattr(elasticache_module.Vpc, "from_lookup", lambda: vpc)
    monkeypatch.setattr(elasticache_module, "get_supernet_prefix_list", lambda: SimpleNamespace(id="pl-supernet"))
    monkeypatch.setattr(elasticache_module, "get_peered_supernets_prefix_list", lambda: SimpleNamespace(id="pl-peered"))
    monkeypatch.setattr(elasticache_module, "get_sysenv", lambda: "co-aws-us-test-1-sandbox-dev")
    monkeypatch.setattr(elasticache_module, "get_tags", lambda *args, **kwargs: {"Name": "-".join(args)})


def test_config_type():
    assert Elasticache.get_config_type() is ReplicationGroups


@pulumi.runtime.test
def test_one_export_per_replication_group():
    exports = Elasticache(
        "elasticache",
        ReplicationGroups(
            replication_groups=[
                ReplicationGroupConfig(name="sessions"),
                ReplicationGroupConfig(name="queues", multi_az_enabled=True),
            ]
        ),
    ).run()

    assert len(exports) == 2
    assert all(export.auth_token is None for export in exports)

    def check(args):
        primary, reader, port = args
        assert primary == "stack-sessions-replication-group.primary.cache.amazonaws.com"
        assert reader == "stack-sessions-replication-group.reader.cache.amazonaws.com"
        assert port == 6379

    return pulumi.Output.all(
        exports[0].primary_endpoint_address,
        exports[0].reader_endpoint_address,
        exports[0].port,
    ).apply(check)


@pulumi.runtime.test
def test_transit_encryption_generates_auth_token():
    exports = Elasticache(
        "elasticache",
        ReplicationGroups(replication_groups=[ReplicationGroupConfig(name="sessions", transit_encryption_enabled=True)]),
    ).run()

    assert exports[0].auth_token is not None


def test_invalid_group_fails_the_stack():
    with pytest.raises(ConfigurationError, match="multi-AZ required under cluster mode"):
        Elasticache(
            "elasticache",
            ReplicationGroups(
                replication_groups=[
                    ReplicationGroupConfig(name="sessions", cluster_mode_enabled=True, multi_az_enabled=False)
                ]
            ),
        ).run()
