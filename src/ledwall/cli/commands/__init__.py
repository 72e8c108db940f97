"""CLI command implementations for the ledwall application.

- validate: Validate a project file
- templates: Manage project templates
- modules: Browse the module catalog
"""

from ledwall.cli.commands.modules import modules_app
from ledwall.cli.commands.templates import templates_app
from ledwall.cli.commands.validate import validate_command

__all__ = ["modules_app", "templates_app", "validate_command"]
