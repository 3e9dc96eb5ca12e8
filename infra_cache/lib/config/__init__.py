from .core import (
    get_sysenv,
    get_purpose,
    get_phase,
    get_region,
    get_stack,
    get_project,
    get_team,
    tag_namespace,
    tag_prefix,
)
from .mapper import config_from_dict, get_stack_config
from .thunder_env import thunder_env, ThunderConfigException
