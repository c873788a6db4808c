"""artifactcheck CLI — Typer-based command-line interface.

Provides the ``artifactcheck`` command.  ``check`` is what the CI step
runs; ``fingerprint`` and ``hashes`` help debug cache misses locally.
All terminal output uses Rich.
"""
