"""Interfaces shared with the surrounding application: envelope and protocols."""

from structcopy.interfaces.models import Response, ResponseResult
from structcopy.interfaces.protocol import TemplateRenderer

__all__ = [
    "Response",
    "ResponseResult",
    "TemplateRenderer",
]
