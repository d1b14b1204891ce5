"""Tweeter static server package."""

# Lazy import of the Flask factory so that importing ``tweeter`` for
# metadata such as the version does not load Flask and the config.
from .version import __version__  # re-export for ``tweeter.__version__``

__all__ = ["create_app", "__version__"]


def create_app(config_name: str = "default", **overrides):
    """Factory function wrapper for the Flask application."""
    from .web.main import (
        create_app as _create_app,  # pylint:disable=import-outside-toplevel
    )

    return _create_app(config_name, **overrides)
