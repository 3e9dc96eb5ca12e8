from typing import Optional

from pulumi import Input, ResourceOptions, log
from pulumi_aws import elasticache

from infra_cache.lib.lifecycle import RemovalPolicy, removal_policy_options


class SubnetGroup:
    """An ElastiCache subnet group, created here or referenced by name"""

    def __init__(self, subnet_group_name: Input[str], resource: Optional[elasticache.SubnetGroup] = None):
        self._subnet_group_name = subnet_group_name
        self._resource = resource

    @property
    def subnet_group_name(self) -> Input[str]:
        return self._subnet_group_name

    @property
    def resource(self) -> Optional[elasticache.SubnetGroup]:
        return self._resource

    @classmethod
    def from_subnet_group_name(cls, subnet_group_name: str) -> "SubnetGroup":
        return cls(subnet_group_name)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        subnet_ids: list[Input[str]],
        *,
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        tags: Optional[dict] = None,
        opts: Optional[ResourceOptions] = None,
    ) -> "SubnetGroup":
        log.debug(f"creating subnet group `{name}` over {len(subnet_ids)} subnets")

        resource = elasticache.SubnetGroup(
            name,
            description=description,
            subnet_ids=subnet_ids,
            tags=tags,
            opts=removal_policy_options(removal_policy, opts),
        )
        return cls(resource.name, resource=resource)
