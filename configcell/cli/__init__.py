"""configcell CLI: Typer-based command-line interface.

Provides the ``configcell`` command with subcommands for generating the
manifest, analysing preserved-account shards, probing the bloom filter, and
listing profiles.

Diagnostics use Rich on stderr; stdout carries only machine-readable output.
"""
