from abc import ABC, abstractmethod
from typing import Any, Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_cache.lib.utils import outputs_from_exports


class BaseModule(ComponentResource, ABC):
    """
    A stack module: one ``ComponentResource`` per stack, configured from the stack's config and parenting
    everything the stack creates.
    """

    def __init__(self, name: str, config: Any, opts: ResourceOptions = None):
        super().__init__(
            f"pkg:infra-cache:aws:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        self._config = config

    @classmethod
    def get_config_type(cls) -> Type:
        """The config dataclass, read from the type hint of ``build``'s ``config`` param"""
        try:
            return get_type_hints(cls.build)["config"]
        except KeyError:
            raise TypeError(f"`{cls.__name__}.build` does not have a type hint for the `config` param")

    def run(self) -> Any:
        """Build the module's resources and register their exports as outputs

        :return: An exports object
        """
        log.debug(f"building module `{self.__class__.__name__}`")

        exports = self.build(self._config)

        self.register_outputs(outputs_from_exports(exports))

        return exports

    @abstractmethod
    def build(self, config: Any) -> Any:
        """Create cloud resources

        :return: An exports object
        """
