from ..config import (
    tag_prefix,
    get_sysenv,
    get_stack,
    get_project,
    get_purpose,
    get_phase,
    get_team,
)


def get_tags(service, role, group=None) -> dict:
    """
    Generate the standard tag dict for a resource

    example, the subnet group of the `sessions` replication group:
        Name = elasticache-subnet_group-sessions
        thunder:sysenv = co-aws-us-west-2-prod-app
        thunder:service = elasticache
        thunder:role = subnet_group
        thunder:group = sessions
        thunder:createdby = pulumi
        thunder:team = infrastructure
        thunder:project = elasticache
        thunder:stack = elasticache
        thunder:purpose = app
        thunder:phase = prod

    :param service: This resource's "namespace" (elasticache, subnet,...)
    :param role: The role this resource performs within the namespace (cluster, sg, subnet_group,...)
    :param group: The group this resource belongs to (sessions, us-west-2a). Leave unset to use "main".
    :return: Dict of tags
    """
    group_suffix = f"-{group}" if group else ""

    return {
        "Name": f"{service}-{role}{group_suffix}",
        f"{tag_prefix}sysenv": get_sysenv(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group or "main",
        f"{tag_prefix}team": get_team(),
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
        f"{tag_prefix}purpose": get_purpose(),
        f"{tag_prefix}phase": get_phase(),
    }
