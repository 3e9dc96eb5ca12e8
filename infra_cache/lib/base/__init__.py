from .base_module import BaseModule
