"""Command auto-discovery and registration.

Scans sht_colour/commands/ for modules that define a `command` object of type
Command and collects them into a dict keyed by name.

pkgutil.iter_modules lists nothing inside frozen binaries, so discovery falls
back to the explicit module list below.
"""

import importlib
import pkgutil

from sht_colour.core.types import Command

_registry: dict[str, Command] = {}
_modules: dict[str, object] = {}

# Known command module names, used when pkgutil cannot list the package
_COMMAND_MODULES = [
    'parse',
    'ramp',
    'to_rgb',
    'to_sht',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import sht_colour.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'sht_colour.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd
            _modules[cmd.name] = module

    return _registry


def module_for(name: str) -> object:
    """The module that defines command `name` (for docstring access)."""
    get(name)
    return _modules[name]


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
