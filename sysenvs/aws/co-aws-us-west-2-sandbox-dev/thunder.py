# Boilerplate Pulumi entrypoint, copy it next to the Pulumi.yaml of any new project.
# The stack name is the config namespace: the `replication_groups` of stack `elasticache`
# live under `elasticache:replication_groups` in Pulumi.elasticache.yaml.
from infra_cache.launcher import run_active_stack

run_active_stack()
