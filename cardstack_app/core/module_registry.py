"""Utilities for declaratively registering application modules.

Each feature module is a package exposing a ``blueprint`` and a
``setup_module(app)`` hook that imports its routes. The registry describes
modules with metadata so discovery and registration stay in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str = "blueprint"
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_blueprint(self, app: Flask) -> Blueprint:
        """Import the module, run its setup hook and return its blueprint."""

        module = import_string(self.import_path)
        setup = getattr(module, "setup_module", None)
        if callable(setup):
            setup(app)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint(app)
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in Cardstack modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("cardstack_app.modules.auth", url_prefix="/users", version="1.0"),
    ModuleDefinition("cardstack_app.modules.landing", version="1.0"),
    ModuleDefinition("cardstack_app.modules.dashboard", url_prefix="/dashboard", version="1.0"),
)
