"""Extension layer: declaration sinks and layout providers via pluggy.

Discovery: entry_points (pip-installed) plus ``.gridareas/plugins/*.py``.
INVARIANT: Plugin discovery failures are warnings, never errors.
"""

from gridareas.plugins.manager import HookSink, PluginManager

__all__ = ["HookSink", "PluginManager"]
