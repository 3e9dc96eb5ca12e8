from abc import ABC, abstractmethod
from dataclasses import fields
from typing import Mapping, Optional, Union

from dacite import Config, DaciteError, from_dict
from pulumi import ComponentResource, Input, ResourceOptions, log
from pulumi_aws import elasticache

from infra_cache.lib.lifecycle import RemovalPolicy, removal_policy_options
from infra_cache.lib.network import Connections, Port, SecurityGroup
from .encryption import resolve_encryption
from .endpoint import Endpoint
from .errors import ReferenceIntegrityError
from .resource_spec import ResourceSpec, build_resource_spec
from .subnet_group import SubnetGroup
from .topology import resolve_topology
from .types import ReplicationGroupAttributes, ReplicationGroupProps
from .validation import validate_replication_group


class IReplicationGroup(ABC):
    """
    What consumers of a replication group get to see, whether it was created by this program or imported.
    """

    @property
    @abstractmethod
    def replication_group_id(self) -> Input[str]:
        """Identifier of the replication group"""

    @property
    @abstractmethod
    def primary_endpoint(self) -> Endpoint:
        """The endpoint for read/write operations"""

    @property
    @abstractmethod
    def reader_endpoint(self) -> Endpoint:
        """The endpoint for read-only operations"""

    @property
    @abstractmethod
    def connections(self) -> Connections:
        """Network access to the replication group"""


class ImportedReplicationGroup(IReplicationGroup):
    """A replication group managed outside this program, built verbatim from its attributes"""

    def __init__(self, name: str, attrs: ReplicationGroupAttributes):
        self._replication_group_id = attrs.replication_group_id
        self._primary_endpoint = Endpoint(attrs.primary_endpoint_address, attrs.primary_endpoint_port)
        self._reader_endpoint = Endpoint(attrs.reader_endpoint_address, attrs.reader_endpoint_port)
        self._connections = Connections(
            name,
            security_groups=attrs.security_groups or [],
            default_port=Port.tcp(attrs.primary_endpoint_port),
        )

    @property
    def replication_group_id(self) -> Input[str]:
        return self._replication_group_id

    @property
    def primary_endpoint(self) -> Endpoint:
        return self._primary_endpoint

    @property
    def reader_endpoint(self) -> Endpoint:
        return self._reader_endpoint

    @property
    def connections(self) -> Connections:
        return self._connections


def _attributes_from_mapping(attrs: Mapping) -> ReplicationGroupAttributes:
    # values may be outputs of other stacks, only the structure is checked
    try:
        return from_dict(
            data_class=ReplicationGroupAttributes,
            data=dict(attrs),
            config=Config(check_types=False, strict=True),
        )
    except DaciteError as e:
        raise ReferenceIntegrityError(f"incomplete replication group attributes: {e}") from e


def _check_attributes(attrs: ReplicationGroupAttributes) -> ReplicationGroupAttributes:
    required = [f.name for f in fields(attrs) if f.name != "security_groups"]
    if missing := [name for name in required if getattr(attrs, name) is None]:
        raise ReferenceIntegrityError(f"incomplete replication group attributes: missing {', '.join(missing)}")
    return attrs


class ReplicationGroup(ComponentResource, IReplicationGroup):
    """
    A Redis replication group, with the security group and subnet group it needs when none are given.

    The description is resolved and validated before anything is registered: a ``ConfigurationError`` leaves no
    resource behind.
    """

    def __init__(self, name: str, props: ReplicationGroupProps, opts: Optional[ResourceOptions] = None):
        topology = resolve_topology(props)
        validate_replication_group(props, topology)
        encryption = resolve_encryption(props)
        removal_policy = props.removal_policy or RemovalPolicy.DESTROY
        subnet_ids = props.vpc.select_subnets(props.vpc_subnets) if props.subnet_group is None else None

        super().__init__("pkg:infra-cache:aws:ReplicationGroup", name, None, opts)

        log.debug(f"replication group `{name}` resolved to {topology}", resource=self)

        if props.publicly_accessible:
            log.warn("ElastiCache replication groups cannot be publicly accessible, ignoring", resource=self)

        child_opts = removal_policy_options(removal_policy, ResourceOptions(parent=self))

        if props.subnet_group is not None:
            self._subnet_group = props.subnet_group
        else:
            self._subnet_group = SubnetGroup.create(
                f"{name}-subnet-group",
                description=f"Subnets for {name} ElastiCache Replication Group",
                subnet_ids=subnet_ids,
                removal_policy=removal_policy,
                tags=props.tags,
                opts=ResourceOptions(parent=self),
            )

        if props.security_groups is not None:
            self._security_groups = list(props.security_groups)
        else:
            self._security_groups = [
                props.vpc.create_security_group(
                    f"{name}-security-group",
                    description=f"ElastiCache security group for {name}",
                    tags=props.tags,
                    opts=child_opts,
                )
            ]

        self._resource_spec = build_resource_spec(
            name,
            props,
            topology,
            encryption,
            security_group_ids=[sg.security_group_id for sg in self._security_groups],
            subnet_group_name=self._subnet_group.subnet_group_name,
        )

        self._resource = elasticache.ReplicationGroup(
            f"{name}-replication-group",
            **self._resource_spec.to_resource_args(),
            opts=child_opts,
        )

        # there is no primary endpoint in cluster mode, clients go through the configuration endpoint
        primary_address = (
            self._resource.configuration_endpoint_address
            if props.cluster_mode_enabled
            else self._resource.primary_endpoint_address
        )
        self._primary_endpoint = Endpoint(primary_address, self._resource.port)
        self._reader_endpoint = Endpoint(self._resource.reader_endpoint_address, self._resource.port)

        self._connections = Connections(
            name,
            security_groups=self._security_groups,
            default_port=Port.tcp(self._primary_endpoint.port),
            opts=ResourceOptions(parent=self),
        )

        self.register_outputs(
            {
                "replication_group_id": self._resource.id,
                "primary_endpoint_address": self._primary_endpoint.hostname,
                "reader_endpoint_address": self._reader_endpoint.hostname,
                "port": self._resource.port,
            }
        )

    @staticmethod
    def from_replication_group_attributes(
        name: str,
        attrs: Union[ReplicationGroupAttributes, Mapping],
    ) -> IReplicationGroup:
        """Reference a replication group created elsewhere

        Nothing is created and nothing is validated, the values are used as given.

        :param name: Name used for resources created through the connections
        :param attrs: The replication group attributes, as a dataclass or a mapping
        :raises ReferenceIntegrityError: when required attributes are missing
        :return: A replication group handle
        """
        if isinstance(attrs, Mapping):
            attrs = _attributes_from_mapping(attrs)

        return ImportedReplicationGroup(name, _check_attributes(attrs))

    @property
    def replication_group_id(self) -> Input[str]:
        return self._resource.id

    @property
    def primary_endpoint(self) -> Endpoint:
        return self._primary_endpoint

    @property
    def reader_endpoint(self) -> Endpoint:
        return self._reader_endpoint

    @property
    def connections(self) -> Connections:
        return self._connections

    @property
    def resource_spec(self) -> ResourceSpec:
        return self._resource_spec

    @property
    def resource(self) -> elasticache.ReplicationGroup:
        return self._resource

    @property
    def security_groups(self) -> list[SecurityGroup]:
        return list(self._security_groups)

    @property
    def subnet_group(self) -> SubnetGroup:
        return self._subnet_group
