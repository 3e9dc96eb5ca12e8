from typing import Optional, Sequence

from pulumi import Input, ResourceOptions, log

from infra_cache.lib.config import tag_prefix
from .lookup import get_sysenv_subnets, get_sysenv_vpc
from .security_group import SecurityGroup
from .types import Subnet, SubnetSelection, SubnetSelectionError, SubnetType

_DEFAULT_SUBNET_PREFERENCE = (SubnetType.PRIVATE, SubnetType.ISOLATED, SubnetType.PUBLIC)


class Vpc:
    """
    Network placement for resources that live in a VPC.

    Hands out subnet IDs by selection and creates security groups scoped to the VPC. Build one from known IDs, or
    with ``from_lookup`` to find the current SysEnv's VPC.
    """

    def __init__(self, vpc_id: Input[str], subnets: Sequence[Subnet]):
        self._vpc_id = vpc_id
        self._subnets = list(subnets)

    @property
    def vpc_id(self) -> Input[str]:
        return self._vpc_id

    @property
    def subnets(self) -> list[Subnet]:
        return list(self._subnets)

    def select_subnets(self, selection: Optional[SubnetSelection] = None) -> list[Input[str]]:
        """Resolve a subnet selection to subnet IDs

        :param selection: Which subnets to pick, defaults to the private subnets
        :return: The selected subnet IDs
        """
        selection = selection or SubnetSelection(subnet_type=SubnetType.PRIVATE)

        if selection.subnet_ids is not None:
            return list(selection.subnet_ids)

        subnets = self._subnets
        if selection.availability_zones:
            subnets = [s for s in subnets if s.availability_zone in selection.availability_zones]

        if selection.subnet_type is not None:
            selected = [s for s in subnets if s.subnet_type is selection.subnet_type]
            if not selected:
                raise SubnetSelectionError(f"There are no '{selection.subnet_type.value}' subnets in this VPC")
            return [s.subnet_id for s in selected]

        for subnet_type in _DEFAULT_SUBNET_PREFERENCE:
            if selected := [s for s in subnets if s.subnet_type is subnet_type]:
                return [s.subnet_id for s in selected]

        raise SubnetSelectionError("There are no subnets in this VPC matching the selection")

    def create_security_group(
        self,
        name: str,
        description: str,
        *,
        allow_all_outbound: bool = True,
        tags: Optional[dict] = None,
        opts: Optional[ResourceOptions] = None,
    ) -> SecurityGroup:
        return SecurityGroup.create(
            name,
            vpc_id=self._vpc_id,
            description=description,
            allow_all_outbound=allow_all_outbound,
            tags=tags,
            opts=opts,
        )

    @classmethod
    def from_lookup(cls) -> "Vpc":
        """Find the VPC of the current SysEnv and its subnets

        Subnets mapping a public IP on launch are public. The others are private when their thunder role tag says so,
        isolated otherwise.

        :return: A Vpc handle
        """
        vpc = get_sysenv_vpc()
        subnets = [
            Subnet(
                subnet_id=attributes.id,
                subnet_type=_classify_subnet(attributes.map_public_ip_on_launch, attributes.tags or {}),
                availability_zone=attributes.availability_zone,
            )
            for attributes in get_sysenv_subnets(vpc.id)
        ]

        log.debug(f"found {len(subnets)} subnets in vpc `{vpc.id}`")

        return cls(vpc.id, subnets)


def _classify_subnet(map_public_ip_on_launch: bool, tags: dict) -> SubnetType:
    if map_public_ip_on_launch:
        return SubnetType.PUBLIC
    elif tags.get(f"{tag_prefix}role") == SubnetType.PRIVATE.value:
        return SubnetType.PRIVATE
    else:
        return SubnetType.ISOLATED
