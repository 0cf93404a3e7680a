"""Optional modules (database, auth, CMS, payments, email) and lookups.

Every list-returning lookup is deterministic: deduplicated lists of keys or
packages come back sorted, so ``.env.example`` and install commands are
reproducible regardless of the order modules were picked in.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from zero.errors import UnknownDefinitionError
from zero.models import FrameworkId, ModuleId
from zero.registry.base_env import EnvVarHelp

_NEXT = (FrameworkId.NEXTJS,)
_EXPO = (FrameworkId.EXPO,)


class ModuleDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ModuleId
    label: str
    description: str
    connect_url: str | None = None
    env_vars: tuple[EnvVarHelp, ...] = ()
    packages: dict[FrameworkId, tuple[str, ...]] = Field(default_factory=dict)

    def packages_for(self, framework: FrameworkId | str) -> tuple[str, ...]:
        return self.packages.get(FrameworkId(framework), ())

    def env_help_for(self, framework: FrameworkId | str) -> list[EnvVarHelp]:
        return [item for item in self.env_vars if item.applies_to(framework)]


class ModuleConnection(BaseModel):
    """A "connect your account" link shown on the generated setup page."""

    model_config = ConfigDict(frozen=True)

    module_id: ModuleId
    label: str
    url: str


MODULES: tuple[ModuleDefinition, ...] = (
    ModuleDefinition(
        id=ModuleId.NEON,
        label="Database (Neon)",
        description="Serverless Postgres with Neon.",
        connect_url="https://console.neon.tech",
        env_vars=(
            EnvVarHelp(
                key="DATABASE_URL",
                description="Postgres connection string",
                url="https://neon.tech/docs/connect/connect-from-any-app",
            ),
        ),
        packages={
            FrameworkId.NEXTJS: ("@neondatabase/serverless",),
            FrameworkId.EXPO: ("@neondatabase/serverless",),
        },
    ),
    ModuleDefinition(
        id=ModuleId.CLERK,
        label="Auth (Clerk)",
        description="Authentication with Clerk.",
        connect_url="https://dashboard.clerk.com",
        env_vars=(
            EnvVarHelp(
                key="NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY",
                description="Clerk publishable key",
                url="https://dashboard.clerk.com/last-active?path=api-keys",
                frameworks=_NEXT,
            ),
            EnvVarHelp(
                key="CLERK_SECRET_KEY",
                description="Clerk secret key",
                url="https://dashboard.clerk.com/last-active?path=api-keys",
                frameworks=_NEXT,
            ),
            EnvVarHelp(
                key="EXPO_PUBLIC_CLERK_PUBLISHABLE_KEY",
                description="Clerk publishable key",
                url="https://dashboard.clerk.com/last-active?path=api-keys",
                frameworks=_EXPO,
            ),
        ),
        packages={
            FrameworkId.NEXTJS: ("@clerk/nextjs",),
            FrameworkId.EXPO: ("@clerk/clerk-expo", "expo-secure-store"),
        },
    ),
    ModuleDefinition(
        id=ModuleId.PAYLOAD,
        label="CMS (Payload)",
        description="Headless CMS using Payload.",
        connect_url="https://payloadcms.com/docs/getting-started/installation",
        env_vars=(
            EnvVarHelp(key="PAYLOAD_SECRET", description="Secret used to sign Payload tokens"),
            EnvVarHelp(key="DATABASE_URL", description="Database used by Payload"),
        ),
        packages={
            FrameworkId.NEXTJS: ("payload",),
            FrameworkId.EXPO: ("payload",),
        },
    ),
    ModuleDefinition(
        id=ModuleId.STRIPE,
        label="Payments (Stripe)",
        description="Payments via Stripe SDK.",
        connect_url="https://dashboard.stripe.com/apikeys",
        env_vars=(
            EnvVarHelp(
                key="STRIPE_SECRET_KEY",
                description="Stripe secret API key",
                url="https://dashboard.stripe.com/apikeys",
            ),
            EnvVarHelp(
                key="STRIPE_WEBHOOK_SECRET",
                description="Signing secret of the Stripe webhook endpoint",
                url="https://dashboard.stripe.com/webhooks",
            ),
        ),
        packages={
            FrameworkId.NEXTJS: ("stripe",),
            FrameworkId.EXPO: ("stripe",),
        },
    ),
    ModuleDefinition(
        id=ModuleId.EMAIL,
        label="Email (Resend)",
        description="Contact form delivered with Resend.",
        connect_url="https://resend.com/api-keys",
        env_vars=(
            EnvVarHelp(
                key="RESEND_API_KEY",
                description="Resend API key",
                url="https://resend.com/api-keys",
                frameworks=_NEXT,
            ),
            EnvVarHelp(
                key="CONTACT_FROM_EMAIL",
                description="Verified sender email address",
                frameworks=_NEXT,
            ),
            EnvVarHelp(
                key="CONTACT_TO_EMAIL",
                description="Destination email address",
                frameworks=_NEXT,
            ),
            EnvVarHelp(
                key="EXPO_PUBLIC_CONTACT_ENDPOINT",
                description="Contact API endpoint (e.g. https://yourdomain.com/api/contact)",
                frameworks=_EXPO,
            ),
        ),
        packages={
            FrameworkId.NEXTJS: ("resend",),
        },
    ),
)


def get_module_definition(module_id: ModuleId | str) -> ModuleDefinition:
    """Look up a module by id.

    Raises:
        UnknownDefinitionError: If *module_id* is not registered.
    """
    for module in MODULES:
        if module.id == module_id:
            return module
    raise UnknownDefinitionError("module", str(getattr(module_id, "value", module_id)))


def get_module_packages(
    module_ids: Iterable[ModuleId | str], framework: FrameworkId | str
) -> list[str]:
    """Return the sorted, unique packages the modules need under *framework*."""
    packages: set[str] = set()
    for module_id in module_ids:
        packages.update(get_module_definition(module_id).packages_for(framework))
    return sorted(packages)


def get_module_env_help(
    module_ids: Iterable[ModuleId | str], framework: FrameworkId | str
) -> list[EnvVarHelp]:
    """Return env help for the modules, unique by key and sorted by key.

    When two modules document the same key the first one wins.
    """
    by_key: dict[str, EnvVarHelp] = {}
    for module_id in module_ids:
        for item in get_module_definition(module_id).env_help_for(framework):
            by_key.setdefault(item.key, item)
    return [by_key[key] for key in sorted(by_key)]


def get_module_env_vars(
    module_ids: Iterable[ModuleId | str], framework: FrameworkId | str | None = None
) -> list[str]:
    """Return the sorted, unique env keys the modules contribute.

    Without *framework* every key is returned regardless of its filter.
    """
    keys: set[str] = set()
    for module_id in module_ids:
        module = get_module_definition(module_id)
        items = module.env_vars if framework is None else module.env_help_for(framework)
        keys.update(item.key for item in items)
    return sorted(keys)


def get_module_connections(module_ids: Iterable[ModuleId | str]) -> list[ModuleConnection]:
    """Return connect links of the selected modules in registry order."""
    selected = {get_module_definition(module_id).id for module_id in module_ids}
    return [
        ModuleConnection(module_id=module.id, label=module.label, url=module.connect_url)
        for module in MODULES
        if module.id in selected and module.connect_url
    ]


def merge_env_help(*lists: Iterable[EnvVarHelp]) -> list[EnvVarHelp]:
    """Concatenate help lists, keeping the first descriptor for each key."""
    merged: dict[str, EnvVarHelp] = {}
    for items in lists:
        for item in items:
            merged.setdefault(item.key, item)
    return list(merged.values())
