"""Built-in plugins shipped with gridareas."""
