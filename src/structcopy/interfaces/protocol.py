"""Protocols for collaborators of the copy engine.

Defines the template rendering interface that view-model projections produced
by the copiers are typically handed to.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from structcopy.interfaces.models import Response


@runtime_checkable
class TemplateRenderer(Protocol):
    """Protocol for rendering a template against a model.

    Usage:
        view = structural_copy(order, OrderView)
        response = renderer.render("Hello {{ name }}", view)
        if response.is_success:
            send(response.data)
    """

    def render(self, template_source: str, model: Any) -> Response[str]:
        """Render a template.

        Args:
            template_source: Template text.
            model: Object whose fields the template reads.

        Returns:
            Success with the rendered text, or an error response. Implementations
            report failures through the envelope instead of raising.
        """
        ...
