"""Builds the engine registry from ALL_SPECS and installs it (import side-effect)."""
from .api import set_registry
from .core.engine import EngineRegistry
from .engines.factory import make_engine
from .engines.specs import ALL_SPECS
from .attributes import standard as _standard  # noqa: F401  registers attributes


def build_registry() -> EngineRegistry:
    return EngineRegistry({name: make_engine(spec) for name, spec in ALL_SPECS.items()})


set_registry(build_registry())
