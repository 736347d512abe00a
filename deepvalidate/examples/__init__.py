"""Example models showing how to use deepvalidate."""

from typing import Any, Callable, Dict

from . import basic, complex

EXAMPLES: Dict[str, Callable[[], Any]] = {
    "basic": basic.build,
    "complex": complex.build,
}

__all__ = ["EXAMPLES", "basic", "complex"]
