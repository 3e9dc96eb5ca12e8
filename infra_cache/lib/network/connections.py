from dataclasses import dataclass
from typing import Optional, Sequence

from pulumi import Input, ResourceOptions, log
from pulumi_aws import ec2

from .security_group import SecurityGroup


@dataclass(frozen=True)
class Port:
    protocol: str
    """tcp, udp, icmp or -1 for all traffic"""

    from_port: Input[int]

    to_port: Input[int]

    @classmethod
    def tcp(cls, port: Input[int]) -> "Port":
        return cls("tcp", port, port)

    @classmethod
    def tcp_range(cls, start: int, end: int) -> "Port":
        return cls("tcp", start, end)

    @classmethod
    def all_tcp(cls) -> "Port":
        return cls("tcp", 0, 65535)

    @classmethod
    def all_traffic(cls) -> "Port":
        return cls("-1", 0, 0)


@dataclass(frozen=True)
class Peer:
    """The other side of a security group rule. Exactly one field is expected to be set."""

    cidr_blocks: Optional[list[str]] = None

    prefix_list_ids: Optional[list[Input[str]]] = None

    source_security_group_id: Optional[Input[str]] = None

    self_reference: bool = False
    """The security group the rule is attached to"""

    @classmethod
    def ipv4(cls, cidr: str) -> "Peer":
        return cls(cidr_blocks=[cidr])

    @classmethod
    def any_ipv4(cls) -> "Peer":
        return cls.ipv4("0.0.0.0/0")

    @classmethod
    def prefix_list(cls, prefix_list_id: Input[str]) -> "Peer":
        return cls(prefix_list_ids=[prefix_list_id])

    @classmethod
    def security_group_id(cls, security_group_id: Input[str]) -> "Peer":
        return cls(source_security_group_id=security_group_id)

    @classmethod
    def same_group(cls) -> "Peer":
        return cls(self_reference=True)


class Connections:
    """
    Network access to whatever sits behind ``security_groups``.

    Every ``allow_*`` call adds one ``aws.ec2.SecurityGroupRule`` per security group and returns the new rules.
    Egress rules are skipped for groups that already allow all outbound traffic.
    """

    def __init__(
        self,
        name: str,
        security_groups: Optional[Sequence[SecurityGroup]] = None,
        default_port: Optional[Port] = None,
        opts: Optional[ResourceOptions] = None,
    ):
        self._name = name
        self._security_groups = list(security_groups or [])
        self._default_port = default_port
        self._opts = opts
        self._rule_count = 0

    @property
    def security_groups(self) -> list[SecurityGroup]:
        return list(self._security_groups)

    @property
    def security_group_ids(self) -> list[Input[str]]:
        return [sg.security_group_id for sg in self._security_groups]

    @property
    def default_port(self) -> Optional[Port]:
        return self._default_port

    def allow_from(self, peer: Peer, port: Port, description: Optional[str] = None) -> list[ec2.SecurityGroupRule]:
        return self._add_rules("ingress", peer, port, description)

    def allow_default_port_from(self, peer: Peer, description: Optional[str] = None) -> list[ec2.SecurityGroupRule]:
        if self._default_port is None:
            raise ValueError(f"connections `{self._name}` have no default port")
        return self.allow_from(peer, self._default_port, description)

    def allow_internally(self, port: Port, description: Optional[str] = None) -> list[ec2.SecurityGroupRule]:
        return self.allow_from(Peer.same_group(), port, description)

    def allow_to(self, peer: Peer, port: Port, description: Optional[str] = None) -> list[ec2.SecurityGroupRule]:
        return self._add_rules("egress", peer, port, description)

    def allow_to_any_ipv4(self, port: Port, description: Optional[str] = None) -> list[ec2.SecurityGroupRule]:
        return self.allow_to(Peer.any_ipv4(), port, description)

    def _add_rules(
        self,
        direction: str,
        peer: Peer,
        port: Port,
        description: Optional[str],
    ) -> list[ec2.SecurityGroupRule]:
        rules = []
        for security_group in self._security_groups:
            if direction == "egress" and security_group.allow_all_outbound:
                log.debug(f"`{self._name}` already allows all outbound traffic, skipping egress rule")
                continue

            rules.append(
                ec2.SecurityGroupRule(
                    f"{self._name}-{direction}-{self._rule_count}",
                    type=direction,
                    description=description,
                    from_port=port.from_port,
                    to_port=port.to_port,
                    protocol=port.protocol,
                    security_group_id=security_group.security_group_id,
                    cidr_blocks=peer.cidr_blocks,
                    prefix_list_ids=peer.prefix_list_ids,
                    source_security_group_id=peer.source_security_group_id,
                    self=peer.self_reference or None,
                    opts=self._opts,
                )
            )
            self._rule_count += 1

        return rules
