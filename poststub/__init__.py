"""Post stub scaffolding for a Markdown blog.

This package creates dated Markdown post stubs with a fixed front-matter block
for a static site generator, and carries a small helper to publish the new post
through git.

The main entry point is the CLI module, which provides the `new` and `publish`
commands.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
