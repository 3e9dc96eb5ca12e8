import logging
import os
import sys
from collections import UserDict
from pathlib import Path

import hiyapyco

logger = logging.getLogger(__name__)


class ThunderConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


class HierarchicalConfig(UserDict):
    """
    A UserDict backed by every `Thunder.common.yaml` found between the program entrypoint and the project root.

    Files closer to the entrypoint win. The merge itself is done by HiYaPyCo, so Jinja2 interpolation works across
    files. Setting `THUNDER_CONFIG_DIR` adds one more directory to search, which is mostly useful for tests and for
    the CLI.

    Example usage:
        from infra_cache.lib.config import thunder_env

        thunder_env.get("tag_namespace", "thunder")
        thunder_env.require("team")
    """

    def __init__(self, limit=5, filename="Thunder.common.yaml"):
        """
        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit)))
        logger.debug("Found configs in %s", configs)

        if configs:
            self.data = dict(hiyapyco.load([str(path) for path in configs], method=hiyapyco.METHOD_MERGE))

    def require(self, key: str) -> any:
        """
        Return `key` from the configuration or raise a `ThunderConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise ThunderConfigException(key)

    def _discover_configs(self, limit) -> list[Path]:
        config_paths = []

        if override := os.getenv("THUNDER_CONFIG_DIR"):
            override_config = Path(override) / self.filename
            if override_config.exists():
                logger.debug("Detected override config [%s]", override_config)
                config_paths.append(override_config)

        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            logger.debug("No __file__ on __main__, skipping entrypoint discovery")
            return config_paths

        entrypoint = Path(main_module.__file__).absolute()
        logger.debug("Entrypoint: %s", entrypoint)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected parent config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root, a config file there still counts
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


thunder_env = HierarchicalConfig()
