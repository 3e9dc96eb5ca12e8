"""
Lookups of the network every SysEnv already has: its VPC, its subnets and the prefix lists of its supernets.

All of them filter on the thunder sysenv tag, so they only ever see resources of the current SysEnv.
"""

from pulumi_aws import ec2

from infra_cache.lib.config import get_sysenv, tag_prefix
from infra_cache.lib.utils import run_once

VPC_SERVICE = "VPC"
PREFIX_LIST_SERVICE = "prefix-list"

SUPERNET_ROLE = "supernet"
PEERED_SUPERNETS_ROLE = "peered-supernets"


def _sysenv_filter(filter_cls):
    return filter_cls(name=f"tag:{tag_prefix}sysenv", values=[get_sysenv()])


@run_once
def get_sysenv_vpc() -> ec2.AwaitableGetVpcResult:
    return ec2.get_vpc(
        filters=[
            ec2.GetVpcFilterArgs(name=f"tag:{tag_prefix}service", values=[VPC_SERVICE]),
            _sysenv_filter(ec2.GetVpcFilterArgs),
        ]
    )


def get_sysenv_subnets(vpc_id: str) -> list[ec2.AwaitableGetSubnetResult]:
    """Every subnet of ``vpc_id`` tagged for this SysEnv, with its attributes

    :param vpc_id: The VPC to search
    :return: One result per subnet, in the order EC2 lists them
    """
    subnet_ids = ec2.get_subnets(
        filters=[
            ec2.GetSubnetsFilterArgs(name="vpc-id", values=[vpc_id]),
            _sysenv_filter(ec2.GetSubnetsFilterArgs),
        ],
    ).ids

    return [ec2.get_subnet(id=subnet_id, vpc_id=vpc_id) for subnet_id in subnet_ids]


def _get_prefix_list(role: str) -> ec2.AwaitableGetManagedPrefixListResult:
    return ec2.get_managed_prefix_list(
        filters=[
            ec2.GetManagedPrefixListFilterArgs(name=f"tag:{tag_prefix}service", values=[PREFIX_LIST_SERVICE]),
            ec2.GetManagedPrefixListFilterArgs(name=f"tag:{tag_prefix}role", values=[role]),
            _sysenv_filter(ec2.GetManagedPrefixListFilterArgs),
        ]
    )


def get_supernet_prefix_list() -> ec2.AwaitableGetManagedPrefixListResult:
    """The prefix list holding the SysEnv's VPC supernet"""
    return _get_prefix_list(SUPERNET_ROLE)


def get_peered_supernets_prefix_list() -> ec2.AwaitableGetManagedPrefixListResult:
    """The prefix list holding the supernets peered with the SysEnv"""
    return _get_prefix_list(PEERED_SUPERNETS_ROLE)
