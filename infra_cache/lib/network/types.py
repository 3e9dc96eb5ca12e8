from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pulumi import Input


class SubnetSelectionError(ValueError):
    pass


class SubnetType(Enum):
    PUBLIC = "public"
    """Subnets that map a public IP on launch"""

    PRIVATE = "private"
    """Subnets routed to the internet through a NAT gateway"""

    ISOLATED = "isolated"
    """Subnets without any route out of the VPC"""


@dataclass(frozen=True)
class Subnet:
    subnet_id: Input[str]
    """The provider-assigned subnet ID"""

    subnet_type: SubnetType
    """How the subnet is routed"""

    availability_zone: Optional[str] = None
    """AZ the subnet lives in"""


@dataclass(frozen=True)
class SubnetSelection:
    subnet_type: Optional[SubnetType] = None
    """Select every subnet of this type. Leave unset to prefer private, then isolated, then public subnets."""

    subnet_ids: Optional[list[Input[str]]] = None
    """Explicit subnet IDs. Takes precedence over `subnet_type`."""

    availability_zones: Optional[list[str]] = None
    """Only keep subnets in these AZs"""
