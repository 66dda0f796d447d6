"""Protocol message types and workspace configuration for a SystemVerilog language server."""

__version__ = "0.1.0"