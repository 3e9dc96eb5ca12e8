from enum import Enum
from typing import Optional

from pulumi import Input, ResourceOptions
from pulumi_aws import elasticache
from semver import VersionInfo


class CacheParameterGroupFamily(Enum):
    """The engine family a parameter group applies to"""

    MEMCACHED_1_4 = "memcached1.4"
    MEMCACHED_1_5 = "memcached1.5"
    MEMCACHED_1_6 = "memcached1.6"
    REDIS_2_6 = "redis2.6"
    REDIS_2_8 = "redis2.8"
    REDIS_3_2 = "redis3.2"
    REDIS_4_0 = "redis4.0"
    REDIS_5_0 = "redis5.0"
    REDIS_6_X = "redis6.x"

    @classmethod
    def for_engine_version(cls, engine: str, engine_version: str) -> "CacheParameterGroupFamily":
        """Find the family of an engine version, e.g. redis 5.0.6 is redis5.0 and redis 6.2.6 is redis6.x

        :raises ValueError: for versions without a known family
        """
        if engine_version.endswith(".x"):
            return cls(f"{engine}{engine_version}")

        version = VersionInfo.parse(engine_version)
        if engine == "redis" and version.major >= 6:
            return cls(f"{engine}{version.major}.x")

        return cls(f"{engine}{version.major}.{version.minor}")


class ParameterGroup:
    """An ElastiCache parameter group, created here or referenced by name"""

    def __init__(self, parameter_group_name: Input[str], resource: Optional[elasticache.ParameterGroup] = None):
        self._parameter_group_name = parameter_group_name
        self._resource = resource

    @property
    def parameter_group_name(self) -> Input[str]:
        return self._parameter_group_name

    @property
    def resource(self) -> Optional[elasticache.ParameterGroup]:
        return self._resource

    @classmethod
    def from_parameter_group_name(cls, parameter_group_name: str) -> "ParameterGroup":
        return cls(parameter_group_name)

    @classmethod
    def create(
        cls,
        name: str,
        family: CacheParameterGroupFamily,
        *,
        properties: Optional[dict[str, str]] = None,
        description: Optional[str] = None,
        tags: Optional[dict] = None,
        opts: Optional[ResourceOptions] = None,
    ) -> "ParameterGroup":
        # See:
        # https://docs.aws.amazon.com/AWSCloudFormation/latest/UserGuide/aws-properties-elasticache-parameter-group.html
        resource = elasticache.ParameterGroup(
            name,
            family=family.value,
            description=description or "ElastiCache parameter group.",
            parameters=[
                elasticache.ParameterGroupParameterArgs(name=key, value=value)
                for key, value in (properties or {}).items()
            ],
            tags=tags,
            opts=opts,
        )
        return cls(resource.name, resource=resource)
