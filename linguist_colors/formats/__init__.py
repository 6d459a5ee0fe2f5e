"""Output formats: one module per format, each defining a `fmt` Format object.

Modules here are found by linguist_colors.registry; adding a format means
adding a module, nothing else.
"""
