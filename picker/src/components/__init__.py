"""UI components for Happy Colors

This package contains the picker's host surfaces and the draggable engine:
- draggable: pointer-to-value engine (toolkit independent) and its Qt bridge
- color_palette / color_slider / color_picker: the picking surfaces
- color_scheme / custom_scheme: generated and user-saved schemes

Widgets are imported from their modules directly so the pure engine can be
used without Qt.
"""
