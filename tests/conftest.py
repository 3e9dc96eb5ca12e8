"""Pytest fixtures and Pulumi mocks for the infra-cache tests."""

import pulumi
import pytest

REPLICATION_GROUP_TYPE = "aws:elasticache/replicationGroup:ReplicationGroup"


class CacheMocks(pulumi.runtime.Mocks):
    """Echo inputs back as state and fake the attributes AWS assigns to replication groups."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        outputs.setdefault("name", args.name)

        if args.typ == REPLICATION_GROUP_TYPE:
            outputs.setdefault("port", 6379)
            outputs.update(
                {
                    "primaryEndpointAddress": f"{args.name}.primary.cache.amazonaws.com",
                    "readerEndpointAddress": f"{args.name}.reader.cache.amazonaws.com",
                    "configurationEndpointAddress": f"{args.name}.configuration.cache.amazonaws.com",
                }
            )

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


pulumi.runtime.set_mocks(CacheMocks(), preview=False)


@pytest.fixture
def vpc():
    """A VPC with private, isolated and public subnets in two AZs."""
    from infra_cache.lib.network import Subnet, SubnetType, Vpc

    return Vpc(
        "vpc-12345",
        [
            Subnet("subnet-private-a", SubnetType.PRIVATE, "us-test-1a"),
            Subnet("subnet-private-b", SubnetType.PRIVATE, "us-test-1b"),
            Subnet("subnet-isolated-a", SubnetType.ISOLATED, "us-test-1a"),
            Subnet("subnet-public-a", SubnetType.PUBLIC, "us-test-1a"),
        ],
    )


@pytest.fixture
def make_props(vpc):
    """Build ReplicationGroupProps placed in the test VPC."""
    from infra_cache.lib.elasticache import ReplicationGroupProps

    def _make_props(**kwargs):
        return ReplicationGroupProps(vpc=vpc, **kwargs)

    return _make_props
