from dataclasses import dataclass

from pulumi import Input
from pulumi_aws import kms


@dataclass(frozen=True)
class KeyReference:
    """A KMS key known only by its ARN"""

    key_arn: Input[str]
    """ARN of the key"""

    @classmethod
    def from_key_arn(cls, key_arn: Input[str]) -> "KeyReference":
        return cls(key_arn=key_arn)

    @classmethod
    def from_key(cls, key: kms.Key) -> "KeyReference":
        return cls(key_arn=key.arn)
