"""Output format discovery.

Every public module in linguist_colors/formats/ that defines a `fmt`
object of type Format is registered under fmt.name. The format name need
not match the module name: json_dump.py registers 'json'. The module is
kept alongside so the CLI can show its docstring as help.
"""

import importlib
import pkgutil
from types import ModuleType

from linguist_colors.core.types import Format

_registry: dict[str, tuple[Format, ModuleType]] = {}


def discover() -> dict[str, tuple[Format, ModuleType]]:
    """Import the format modules once; return name -> (Format, module)."""
    if _registry:
        return _registry

    import linguist_colors.formats as pkg

    for info in pkgutil.iter_modules(pkg.__path__):
        if info.name.startswith('_'):
            continue
        module = importlib.import_module(f'{pkg.__name__}.{info.name}')
        fmt = getattr(module, 'fmt', None)
        if isinstance(fmt, Format):
            _registry[fmt.name] = (fmt, module)

    return _registry


def _lookup(name: str) -> tuple[Format, ModuleType]:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown format: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def get(name: str) -> Format:
    return _lookup(name)[0]


def module_for(name: str) -> ModuleType:
    """The module that registered format `name`."""
    return _lookup(name)[1]


def all_formats() -> dict[str, Format]:
    return {name: fmt for name, (fmt, _module) in discover().items()}
