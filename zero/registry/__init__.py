"""Static definitions of frameworks, modules and package managers.

Quick usage::

    from zero.registry import get_module_packages, get_module_env_vars

    get_module_packages(["stripe", "clerk"], "nextjs")
    # ['@clerk/nextjs', 'stripe']
"""

from zero.registry.base_env import EnvVarHelp, get_base_env_help, get_base_env_vars
from zero.registry.frameworks import (
    FRAMEWORKS,
    FrameworkDefinition,
    ScaffoldSpec,
    get_framework_definition,
)
from zero.registry.modules import (
    MODULES,
    ModuleConnection,
    ModuleDefinition,
    get_module_connections,
    get_module_definition,
    get_module_env_help,
    get_module_env_vars,
    get_module_packages,
    merge_env_help,
)
from zero.registry.package_managers import (
    PACKAGE_MANAGERS,
    PackageManagerDefinition,
    PackageRunner,
    get_package_manager_definition,
)

__all__ = [
    "EnvVarHelp",
    "FRAMEWORKS",
    "FrameworkDefinition",
    "MODULES",
    "ModuleConnection",
    "ModuleDefinition",
    "PACKAGE_MANAGERS",
    "PackageManagerDefinition",
    "PackageRunner",
    "ScaffoldSpec",
    "get_base_env_help",
    "get_base_env_vars",
    "get_framework_definition",
    "get_module_connections",
    "get_module_definition",
    "get_module_env_help",
    "get_module_env_vars",
    "get_module_packages",
    "get_package_manager_definition",
    "merge_env_help",
]
