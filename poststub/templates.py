"""Front-matter rendering for post stubs.

This module uses Jinja2 to render the fixed front-matter block written at the
top of every new post. Autoescaping is off since the output is YAML, not HTML,
and the trailing blank line of the template is preserved.
"""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from .stub import PostStub

__all__ = ["FRONT_MATTER_TEMPLATE", "render_front_matter"]

FRONT_MATTER_TEMPLATE = """\
---
title: "{{ stub.title }}"
date: {{ stub.date }}
tags: [{{ stub.tags | join(", ") }}]
categories: [{{ stub.categories | join(", ") }}]
---

"""

_env = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_template = _env.from_string(FRONT_MATTER_TEMPLATE)


def render_front_matter(stub: PostStub) -> str:
    """Render the front-matter block for a post stub.

    Args:
        stub: Values to substitute into the template.

    Returns:
        File content: the front-matter block followed by an empty body.
    """
    return _template.render(stub=stub)
