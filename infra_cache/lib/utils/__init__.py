from .outputs_from_exports import outputs_from_exports
from .run_once import run_once
