from dataclasses import dataclass
from typing import Optional

from pulumi import Input


@dataclass(frozen=True)
class EncryptionConfig:
    at_rest_encrypted: bool
    key_arn: Optional[Input[str]] = None


def resolve_encryption(props) -> EncryptionConfig:
    """Encryption at rest is on unless explicitly disabled, the key is only carried when one was given"""
    return EncryptionConfig(
        at_rest_encrypted=True if props.at_rest_encrypted is None else props.at_rest_encrypted,
        key_arn=props.encryption_key.key_arn if props.encryption_key is not None else None,
    )
