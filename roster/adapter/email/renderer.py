"""Jinja2 renderer for invite email templates."""

import logfire
from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment

from roster.adapter.email.templates import TEMPLATES
from roster.domain.value import TemplateName


class TemplateRenderer:
    """Jinja2 template renderer.

    Uses a sandboxed, autoescaping environment since content values come from
    user input (clinic names, emails).
    """

    def __init__(
        self, templates: dict[TemplateName, tuple[str, str]] | None = None
    ) -> None:
        """Initialize the renderer.

        Args:
            templates: Subject and body sources per template name
        """
        self.templates = templates if templates is not None else TEMPLATES
        self.env = SandboxedEnvironment(
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_string: str, variables: dict[str, str]) -> str:
        """Render a template string with variables.

        Raises:
            TemplateSyntaxError: If template syntax is invalid
            UndefinedError: If a required variable is missing
        """
        try:
            return self.env.from_string(template_string).render(**variables)
        except TemplateSyntaxError as e:
            logfire.error("Template syntax error", error=str(e), line=e.lineno)
            raise
        except UndefinedError as e:
            logfire.error("Undefined variable in template", error=str(e))
            raise

    def render_template(
        self, name: TemplateName, variables: dict[str, str]
    ) -> tuple[str, str]:
        """Render the subject and HTML body of a named template.

        Raises:
            KeyError: If no template is registered under ``name``
        """
        subject, html_body = self.templates[name]
        return self.render(subject, variables), self.render(html_body, variables)
