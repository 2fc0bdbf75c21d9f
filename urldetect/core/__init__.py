"""
Core layer -- Parsing, matching and filtering.

Nothing here touches the filesystem layout or output formats; the
scanner wires these pieces together per file.
"""
