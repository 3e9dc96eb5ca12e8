from .config import ElasticacheExports, ParameterConfig, ReplicationGroupConfig, ReplicationGroups
from .elasticache import Elasticache
