"""
Core math primitives and value types for radial UI widgets.

Pure, stateless helpers with no dependency on rendering or event handling.
"""
