"""Core domain package for guild panel.

Core holds config normalization, guild directory and config sync, navigation
and status reporting without any HTTP or Textual code, so the logic can be
driven by tests or another frontend.
"""
