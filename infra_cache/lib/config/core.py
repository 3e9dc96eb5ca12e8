from pulumi import Config, get_stack, get_project

from infra_cache.lib.utils import run_once
from .thunder_env import thunder_env

aws_config = Config("aws")

tag_namespace = thunder_env.get("tag_namespace", "thunder")
"""Prefix for the standard tags put on every resource. Unrelated to the Pulumi config namespace."""

tag_prefix = f"{tag_namespace}{thunder_env.get('tag_separator', ':')}"


def get_region() -> str:
    return aws_config.require("region")


def get_team() -> str:
    return thunder_env.require("team")


def get_purpose() -> str:
    return thunder_env.require("purpose")


def get_phase() -> str:
    return thunder_env.require("phase")


@run_once
def get_sysenv() -> str:
    """
    Returns the SysEnv name for this program
    SysEnvs are named `{namespace}-aws-{region}-{purpose}-{phase}`, e.g. `co-aws-us-west-2-sandbox-dev`.

    Can be overridden by setting `sysenv` in your Thunder.common.yaml

    :return: SysEnv name
    """
    if config_sysenv := thunder_env.get("sysenv"):
        return config_sysenv

    namespace = thunder_env.require("namespace")
    return f"{namespace}-aws-{get_region()}-{get_purpose()}-{get_phase()}"


__all__ = [
    "get_phase",
    "get_project",
    "get_purpose",
    "get_region",
    "get_stack",
    "get_sysenv",
    "get_team",
    "tag_namespace",
    "tag_prefix",
]
