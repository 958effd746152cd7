from .cli import CLI, main
from .commands import build_registry

__all__ = ["CLI", "main", "build_registry"]
