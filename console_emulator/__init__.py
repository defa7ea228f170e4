"""console_emulator package: an interactive command-shell emulator built around a
command execution engine with injected filesystem and process capabilities.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
