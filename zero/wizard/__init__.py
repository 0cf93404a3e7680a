"""Interactive wizard that collects a :class:`~zero.models.ProjectConfig`."""

from zero.wizard.prompts import Choice, Prompter, RichPrompter, WizardCancelled
from zero.wizard.wizard import ConfirmAction, Step, Wizard, run_wizard

__all__ = [
    "Choice",
    "ConfirmAction",
    "Prompter",
    "RichPrompter",
    "Step",
    "Wizard",
    "WizardCancelled",
    "run_wizard",
]
