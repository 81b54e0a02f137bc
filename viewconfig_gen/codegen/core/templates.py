"""
Jinja2 template engine used to lay out generated files.

Generators render file skeletons from templates and pass already-printed
code fragments in as context values, so HTML autoescaping is off for
everything except .html/.xml templates.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """
    Jinja2 environment with in-memory templates and code generation filters.

    In-memory templates take precedence over files in ``template_dir``, so a
    generator's built-in templates can be overridden only by registering new
    ones under the same name.
    """

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        templates: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            template_dir: Optional directory of template files
            templates: Initial in-memory templates, name -> source
        """
        self.template_dir = template_dir
        self._memory = DictLoader(dict(templates or {}))

        loaders = [self._memory]
        if template_dir is not None and template_dir.exists():
            loaders.append(FileSystemLoader(str(template_dir)))

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["comment"] = comment_lines

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound:
            raise TemplateError(f"Template not found: {template_name}") from None
        except Exception as e:
            raise TemplateError(f"Failed to load template {template_name}: {e}") from e

        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render template source directly."""
        try:
            return self._env.from_string(template_string).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """Register or replace an in-memory template."""
        self._memory.mapping[name] = content

    def add_filter(self, name: str, func: Callable[..., str]):
        """Register a target-specific filter."""
        self._env.filters[name] = func

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False


def comment_lines(value: Any, style: str = "//") -> str:
    """Prefix every line with a comment marker; blank lines get the bare marker."""
    return "\n".join(
        f"{style} {line}" if line.strip() else style for line in str(value).split("\n")
    )


def create_template_engine(
    template_dir: Optional[Path] = None,
    templates: Optional[Mapping[str, str]] = None,
) -> TemplateEngine:
    """Create a template engine, optionally seeded with in-memory templates."""
    return TemplateEngine(template_dir, templates)
