import logging
import os

from pulumi import get_stack, log, export

from infra_cache.lib.config import get_stack_config
from infra_cache.lib.utils import outputs_from_exports
from infra_cache.modules.aws.elasticache import Elasticache


def run_stack(stack_name: str) -> None:
    """Build the replication groups described by a stack's configuration

    :param stack_name: The stack name, also the config namespace
    :return: None
    """
    config = get_stack_config(stack=stack_name, config_cls=Elasticache.get_config_type())

    log.debug(f"running module `elasticache` for stack `{stack_name}`")

    exports = Elasticache(name=stack_name, config=config).run()

    for key, value in outputs_from_exports(exports).items():
        export(key, value)


def run_active_stack() -> None:
    """Build the replication groups of the active stack

    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(stack)


# configured before anything logs, the config layer already does work on import
if os.getenv("THUNDER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "infra-cache logging enabled"
    log.debug(msg)
    logging.debug(msg)
