from enum import Enum
from typing import Optional

from pulumi import ResourceOptions


class RemovalPolicy(Enum):
    """What happens to a resource once it leaves the program"""

    DESTROY = "destroy"
    """Delete the resource"""

    RETAIN = "retain"
    """Keep the resource in the account, only drop it from the Pulumi state"""

    SNAPSHOT = "snapshot"
    """Take a final snapshot where the resource supports one, then delete it"""


def removal_policy_options(policy: RemovalPolicy, opts: Optional[ResourceOptions] = None) -> ResourceOptions:
    """Merge the resource options implementing ``policy`` into ``opts``

    Snapshots are requested through resource arguments, so SNAPSHOT only differs from DESTROY for
    resources that read the policy themselves.

    :param policy: The removal policy to apply
    :param opts: Options to merge into
    :return: The merged options
    """
    return ResourceOptions.merge(
        opts,
        ResourceOptions(retain_on_delete=True if policy is RemovalPolicy.RETAIN else None),
    )
