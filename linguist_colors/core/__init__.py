"""linguist_colors.core — Foundation layer.

Contains the colour model, the nearest-chain builder, the catalog loader,
shared types and settings.
This module has NO dependencies on linguist_colors.formats or linguist_colors.registry.
"""
