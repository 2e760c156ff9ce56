"""Interactive applications built from the widgets."""
