"""The interactive project wizard.

A small linear state machine::

    directory -> name -> domain -> framework -> modules -> confirm -> package_manager

From ``confirm`` the user can jump back to any earlier step.  The wizard then
remembers a single resume target (``confirm``) and returns there as soon as
the edited step is submitted, so the other answers are never asked again.
"""

from __future__ import annotations

from enum import Enum

from zero.models import FrameworkId, ModuleId, PackageManagerId, ProjectConfig
from zero.registry import (
    FRAMEWORKS,
    MODULES,
    PACKAGE_MANAGERS,
    get_framework_definition,
    get_module_definition,
)
from zero.wizard.prompts import Choice, Prompter, RichPrompter, WizardCancelled


class Step(str, Enum):
    DIRECTORY = "directory"
    NAME = "name"
    DOMAIN = "domain"
    FRAMEWORK = "framework"
    MODULES = "modules"
    CONFIRM = "confirm"
    PACKAGE_MANAGER = "package_manager"


class ConfirmAction(str, Enum):
    CONTINUE = "continue"
    EDIT_DIRECTORY = "edit-directory"
    EDIT_NAME = "edit-name"
    EDIT_DOMAIN = "edit-domain"
    EDIT_FRAMEWORK = "edit-framework"
    EDIT_MODULES = "edit-modules"
    CANCEL = "cancel"


_EDIT_TARGETS: dict[ConfirmAction, Step] = {
    ConfirmAction.EDIT_DIRECTORY: Step.DIRECTORY,
    ConfirmAction.EDIT_NAME: Step.NAME,
    ConfirmAction.EDIT_DOMAIN: Step.DOMAIN,
    ConfirmAction.EDIT_FRAMEWORK: Step.FRAMEWORK,
    ConfirmAction.EDIT_MODULES: Step.MODULES,
}

_CONFIRM_CHOICES: tuple[Choice, ...] = (
    Choice(ConfirmAction.CONTINUE, "Continue"),
    Choice(ConfirmAction.EDIT_DIRECTORY, "Edit directory"),
    Choice(ConfirmAction.EDIT_NAME, "Edit name"),
    Choice(ConfirmAction.EDIT_DOMAIN, "Edit domain"),
    Choice(ConfirmAction.EDIT_FRAMEWORK, "Edit framework"),
    Choice(ConfirmAction.EDIT_MODULES, "Edit modules"),
    Choice(ConfirmAction.CANCEL, "Cancel"),
)


class Wizard:
    """Collects a :class:`ProjectConfig` through a :class:`Prompter`.

    Attributes:
        step: The step that will be prompted next.
        resume: Where to go after the current step is submitted, when the
            user arrived here through an ``edit-*`` action.
    """

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter
        self.directory = "."
        self.app_name = ""
        self.domain = ""
        self.framework: FrameworkId = FRAMEWORKS[0].id
        self.modules: list[ModuleId] = []
        self.package_manager: PackageManagerId = PACKAGE_MANAGERS[0].id
        self.step = Step.DIRECTORY
        self.resume: Step | None = None

    def run(self) -> ProjectConfig | None:
        """Run until the user finishes or cancels.

        Returns:
            The collected config, or ``None`` if the user cancelled at any
            point.
        """
        handlers = {
            Step.DIRECTORY: self._ask_directory,
            Step.NAME: self._ask_name,
            Step.DOMAIN: self._ask_domain,
            Step.FRAMEWORK: self._ask_framework,
            Step.MODULES: self._ask_modules,
            Step.CONFIRM: self._confirm,
            Step.PACKAGE_MANAGER: self._ask_package_manager,
        }
        try:
            while True:
                result = handlers[self.step]()
                if result is not None:
                    return result
        except WizardCancelled:
            self.prompter.cancel("Cancelled.")
            return None

    # -- Navigation ----------------------------------------------------------

    def _advance(self, next_step: Step) -> None:
        if self.resume is not None:
            self.step, self.resume = self.resume, None
        else:
            self.step = next_step

    # -- Steps ---------------------------------------------------------------

    def _ask_directory(self) -> None:
        value = self.prompter.text("Project directory", default=self.directory, placeholder=".")
        self.directory = value.strip() or "."
        self._advance(Step.NAME)

    def _ask_name(self) -> None:
        value = self.prompter.text("App name", default=self.app_name, placeholder="my-app").strip()
        if not value:
            self.prompter.error("App name is required.")
            return
        self.app_name = value
        self._advance(Step.DOMAIN)

    def _ask_domain(self) -> None:
        value = self.prompter.text(
            "Domain (optional)", default=self.domain, placeholder="example.com"
        )
        self.domain = value.strip()
        self._advance(Step.FRAMEWORK)

    def _ask_framework(self) -> None:
        choices = [Choice(item.id, item.label, item.description) for item in FRAMEWORKS]
        self.framework = self.prompter.select("Framework", choices, default=self.framework)
        self._advance(Step.MODULES)

    def _ask_modules(self) -> None:
        choices = [Choice(item.id, item.label, item.description) for item in MODULES]
        self.modules = list(self.prompter.multiselect("Modules", choices, defaults=self.modules))
        self._advance(Step.CONFIRM)

    def _confirm(self) -> None:
        self.prompter.note("Review", self.summary_lines())
        action = self.prompter.select("Next step", _CONFIRM_CHOICES, default=ConfirmAction.CONTINUE)
        if action == ConfirmAction.CONTINUE:
            self.step = Step.PACKAGE_MANAGER
        elif action == ConfirmAction.CANCEL:
            raise WizardCancelled()
        else:
            self.resume = Step.CONFIRM
            self.step = _EDIT_TARGETS[ConfirmAction(action)]

    def _ask_package_manager(self) -> ProjectConfig:
        choices = [Choice(item.id, item.label) for item in PACKAGE_MANAGERS]
        self.package_manager = self.prompter.select(
            "Package manager", choices, default=self.package_manager
        )
        return self.build_config()

    # -- Helpers -------------------------------------------------------------

    def summary_lines(self) -> list[str]:
        framework_label = get_framework_definition(self.framework).label
        module_labels = ", ".join(get_module_definition(item).label for item in self.modules)
        return [
            f"Directory: {self.directory}",
            f"App name: {self.app_name}",
            f"Domain: {self.domain or 'None'}",
            f"Framework: {framework_label}",
            f"Modules: {module_labels or 'None'}",
        ]

    def build_config(self) -> ProjectConfig:
        return ProjectConfig(
            directory=self.directory,
            app_name=self.app_name,
            domain=self.domain,
            framework=self.framework,
            modules=tuple(self.modules),
            package_manager=self.package_manager,
        )


def run_wizard(prompter: Prompter | None = None) -> ProjectConfig | None:
    """Run the wizard against the terminal (or *prompter*)."""
    return Wizard(prompter or RichPrompter()).run()
