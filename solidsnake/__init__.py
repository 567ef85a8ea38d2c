"""Solid Snake register virtual machine: opcode table and native benchmark command."""

__version__ = "0.1.0"
__all__ = ["opcodes", "cli"]