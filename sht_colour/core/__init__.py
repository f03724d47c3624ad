"""sht_colour.core: Foundation layer.

Contains the value types, SHT parser, converters, hex codec, palette helpers,
configuration and report builder. This package has NO dependencies on
sht_colour.commands or sht_colour.registry.
Only stdlib and numpy are allowed here.
"""
