# flagyard - MIT Licensed
"""
importer.py

Bootstrap for flags declared across a package.

`define_flag()` calls run when their module is imported. A module that nothing
imports before parsing never gets to register its flags, so applications import
every declaring module up front:

    import_flag_modules("myapp")
    positional = parse_or_exit()
"""
from __future__ import annotations

import importlib
import pkgutil
from types import ModuleType

from flagyard.logger import logger


def import_flag_modules(package: str | ModuleType) -> list[ModuleType]:
    """
    Import a package and every module beneath it.

    Args:
        package (str | ModuleType): Dotted package name or an imported package.

    Returns:
        list[ModuleType]: The imported modules, the package itself first.

    Raises:
        ImportError: If the package or any submodule fails to import.
        ValueError: If `package` is a plain module rather than a package.
    """
    if isinstance(package, str):
        package = importlib.import_module(package)
    if not hasattr(package, "__path__"):
        raise ValueError(f"'{package.__name__}' is a module, not a package.")

    modules = [package]
    for module_info in pkgutil.walk_packages(package.__path__, f"{package.__name__}."):
        modules.append(importlib.import_module(module_info.name))
    logger.debug(
        "Imported %d modules from '%s' for flag registration",
        len(modules),
        package.__name__,
    )
    return modules
