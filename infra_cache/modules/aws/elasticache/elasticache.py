from pulumi import ResourceOptions
from pulumi_aws import ssm
from pulumi_random import RandomPassword

from infra_cache.lib.base import BaseModule
from infra_cache.lib.config import get_stack, get_sysenv
from infra_cache.lib.elasticache import (
    CacheParameterGroupFamily,
    InstanceType,
    ParameterGroup,
    ReplicationGroup,
    ReplicationGroupProps,
)
from infra_cache.lib.elasticache.resource_spec import ENGINE
from infra_cache.lib.kms import KeyReference
from infra_cache.lib.network import Peer, Port, Vpc, get_peered_supernets_prefix_list, get_supernet_prefix_list
from infra_cache.lib.tags import get_tags
from .config import ElasticacheExports, ReplicationGroupConfig, ReplicationGroups


class Elasticache(BaseModule):
    def build(self, config: ReplicationGroups) -> list[ElasticacheExports]:
        vpc = Vpc.from_lookup()
        return [self._create_replication_group(rg, vpc) for rg in config.replication_groups]

    def _create_replication_group(self, args: ReplicationGroupConfig, vpc: Vpc) -> ElasticacheExports:
        replication_group_name = f"{get_stack()}-{args.name}"

        parameter_group = ParameterGroup.create(
            replication_group_name,
            family=CacheParameterGroupFamily.for_engine_version(ENGINE, args.engine_version.value),
            properties={param.name: param.value for param in args.rg_params or []},
            description=f"{replication_group_name} parameter group",
            tags=get_tags(get_stack(), "parameter_group", args.name),
            opts=ResourceOptions(parent=self),
        )

        auth_token = None
        if args.transit_encryption_enabled:
            rg_password = RandomPassword(
                replication_group_name,
                length=32,
                special=False,
                opts=ResourceOptions(parent=self),
            )
            ssm.Parameter(
                f"{replication_group_name}-password",
                name=f"/Infrastructure/{get_sysenv()}/{get_stack()}/{args.name}/MASTER_PASSWORD",
                type="SecureString",
                value=rg_password.result,
                opts=ResourceOptions(parent=rg_password),
            )
            auth_token = rg_password.result

        replication_group = ReplicationGroup(
            replication_group_name,
            ReplicationGroupProps(
                vpc=vpc,
                description=f"{replication_group_name} replication group",
                engine_version=args.engine_version,
                parameter_group=parameter_group,
                node_type=InstanceType(args.node_type),
                cluster_mode_enabled=args.cluster_mode_enabled,
                multi_az_enabled=args.multi_az_enabled,
                automatic_failover_enabled=args.automatic_failover_enabled,
                num_node_groups=args.num_node_groups,
                replicas_per_node_group=args.replicas_per_node_group,
                num_cache_clusters=args.num_cache_clusters,
                at_rest_encrypted=args.at_rest_encrypted,
                encryption_key=KeyReference.from_key_arn(args.encryption_key) if args.encryption_key else None,
                transit_encryption_enabled=args.transit_encryption_enabled,
                auth_token=auth_token,
                port=args.port,
                preferred_maintenance_window=args.preferred_maintenance_window,
                snapshot_window=args.snapshot_window,
                snapshot_retention_limit=args.snapshot_retention_limit,
                removal_policy=args.removal_policy,
                tags=get_tags(get_stack(), "cluster", args.name),
            ),
            opts=ResourceOptions(parent=self),
        )

        replication_group.connections.allow_default_port_from(Peer.prefix_list(get_supernet_prefix_list().id), "redis")
        replication_group.connections.allow_default_port_from(
            Peer.prefix_list(get_peered_supernets_prefix_list().id), "redis from peered supernets"
        )
        replication_group.connections.allow_internally(Port.all_traffic(), "any port from self")

        ssm.Parameter(
            f"{replication_group_name}-connectionuri",
            name=f"/Infrastructure/{get_sysenv()}/{get_stack()}/{args.name}/CONNECTION_URI",
            type="SecureString",
            value=replication_group.primary_endpoint.socket_address,
            opts=ResourceOptions(parent=replication_group),
        )

        return ElasticacheExports(
            id=replication_group.replication_group_id,
            primary_endpoint_address=replication_group.primary_endpoint.hostname,
            reader_endpoint_address=replication_group.reader_endpoint.hostname,
            port=replication_group.primary_endpoint.port,
            auth_token=auth_token,
        )
