"""Template manager for bundled LED wall project templates."""

from importlib import resources
from pathlib import Path


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "indoor-flown": "4 x 2.5 m indoor screen flown on two motors",
    "outdoor-stacked": "6 x 3 m ground-stacked screen on base plates",
    "corporate-small": "3 x 2 m conference backdrop with corner modules",
}


class TemplateManager:
    """Manager for bundled project templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("indoor-flown", Path("main-stage.json"))
    """

    def __init__(self) -> None:
        self._data_package = "ledwall.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return [(name, desc) for name, desc in TEMPLATE_METADATA.items()]

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
