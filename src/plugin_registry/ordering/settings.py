"""ResolverSettings — tunables for priority resolution.

Sensible defaults are provided for all parameters; most deployments never
construct a custom instance.
"""
from __future__ import annotations

import sys

from pydantic import BaseModel, Field

# Lower values take precedence. Bounds mirror a platform-sized integer.
HIGHEST_PRECEDENCE: int = -sys.maxsize - 1
LOWEST_PRECEDENCE: int = sys.maxsize


class ResolverSettings(BaseModel):
    """Configurable priority resolution policy.

    Parameters
    ----------
    max_unwrap_depth:
        Maximum number of decorator layers followed while looking for
        priority metadata. A chain deeper than this resolves to
        ``fallback_priority``.
    fallback_priority:
        Priority assigned to plugins that declare none. Defaults to
        :data:`LOWEST_PRECEDENCE` so that undeclared plugins sort last.
    """

    max_unwrap_depth: int = Field(default=32, ge=0)
    fallback_priority: int = LOWEST_PRECEDENCE

    model_config = {"frozen": True}
