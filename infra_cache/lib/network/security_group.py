from typing import Optional

from pulumi import Input, ResourceOptions, log
from pulumi_aws import ec2

ALL_OUTBOUND = ec2.SecurityGroupEgressArgs(
    description="Allow all outbound traffic by default",
    from_port=0,
    to_port=0,
    protocol="-1",
    cidr_blocks=["0.0.0.0/0"],
)


class SecurityGroup:
    """
    A security group the program can attach things to.

    Either created here (``create``) or referenced by ID (``from_security_group_id``). The ``allow_all_outbound`` flag
    mirrors the group's egress policy and is never recomputed.
    """

    def __init__(
        self,
        security_group_id: Input[str],
        allow_all_outbound: bool = True,
        resource: Optional[ec2.SecurityGroup] = None,
    ):
        self._security_group_id = security_group_id
        self._allow_all_outbound = allow_all_outbound
        self._resource = resource

    @property
    def security_group_id(self) -> Input[str]:
        return self._security_group_id

    @property
    def allow_all_outbound(self) -> bool:
        return self._allow_all_outbound

    @property
    def resource(self) -> Optional[ec2.SecurityGroup]:
        """The backing resource, ``None`` for referenced groups"""
        return self._resource

    @classmethod
    def from_security_group_id(cls, security_group_id: Input[str], allow_all_outbound: bool = True) -> "SecurityGroup":
        return cls(security_group_id, allow_all_outbound=allow_all_outbound)

    @classmethod
    def create(
        cls,
        name: str,
        vpc_id: Input[str],
        description: str,
        *,
        allow_all_outbound: bool = True,
        tags: Optional[dict] = None,
        opts: Optional[ResourceOptions] = None,
    ) -> "SecurityGroup":
        log.debug(f"creating security group `{name}` in `{vpc_id}`")

        resource = ec2.SecurityGroup(
            name,
            description=description,
            vpc_id=vpc_id,
            egress=[ALL_OUTBOUND] if allow_all_outbound else [],
            tags=tags,
            opts=opts,
        )
        return cls(resource.id, allow_all_outbound=allow_all_outbound, resource=resource)
