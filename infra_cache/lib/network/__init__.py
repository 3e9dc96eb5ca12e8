from .connections import Connections, Peer, Port
from .lookup import get_peered_supernets_prefix_list, get_supernet_prefix_list, get_sysenv_subnets, get_sysenv_vpc
from .security_group import SecurityGroup
from .types import Subnet, SubnetSelection, SubnetSelectionError, SubnetType
from .vpc import Vpc
