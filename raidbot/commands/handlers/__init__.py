"""Command cogs: :class:`raids.Raids` and :class:`help.Help`."""
