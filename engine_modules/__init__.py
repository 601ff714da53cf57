"""Module rules for the engine modules maintained in this tree."""

from engine_modules.catalog import create_engine_registry
from engine_modules.landscape_editor import LANDSCAPE_EDITOR_RULES
from engine_modules.plugin_template import plugin_module_rules

__all__ = ["LANDSCAPE_EDITOR_RULES", "create_engine_registry", "plugin_module_rules"]
