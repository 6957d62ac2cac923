"""chat_terminal package: a simulated terminal over an in-memory filesystem of chat conversations.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
