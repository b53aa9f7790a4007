"""Domain layer — identifiers, slugs, filenames, note content, references.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
