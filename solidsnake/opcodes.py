"""Instruction opcodes of the Solid Snake virtual machine."""

from __future__ import annotations

from enum import IntEnum

_ALL_TYPES = ("U8", "U16", "U32", "U64", "I8", "I16", "I32", "I64", "F32", "F64")
_INT_TYPES = _ALL_TYPES[:8]


def _family(prefix: str, base: int, types: tuple[str, ...] = _ALL_TYPES) -> list[tuple[str, int]]:
    return [(f"{prefix}{suffix}", base + offset) for offset, suffix in enumerate(types)]


def _build_members() -> list[tuple[str, int]]:
    members: list[tuple[str, int]] = [
        # Jumps use u64 as target address, conditions are u8.
        ("JumpIfFalse", 1),
        ("JumpIf", 2),
        ("Jump", 3),
    ]
    for prefix, base in (
        ("LoadIndirect", 20),
        ("LoadIndirectWithOffset", 30),
        ("LoadImmediate", 40),
        ("LoadFromImmediate", 60),
        ("StoreIndirectWithOffset", 90),
        ("StoreFromImmediateWithOffset", 130),
    ):
        members += _family(prefix, base)

    # Logical operations apply only to u64 operands used as booleans.
    members += [("LogicalAnd", 150), ("LogicalOr", 151), ("LogicalNot", 152), ("LogicalXor", 153)]

    for prefix, base in (
        ("Add", 170),
        ("Subtract", 200),
        ("Multiply", 230),
        ("Divide", 260),
        ("Modulo", 290),
        ("Equal", 350),
        ("NotEqual", 380),
        ("LessThan", 410),
        ("LessThanOrEqual", 440),
        ("GreaterThan", 470),
        ("GreaterThanOrEqual", 500),
    ):
        members += _family(prefix, base)

    members += [
        ("CallFunction", 600),
        ("Return", 601),
        ("Allocate", 602),
        ("Deallocate", 603),
        ("Memcpy", 604),
        ("MemSet", 605),
        ("Halt", 606),
    ]

    for prefix, base in (("Move", 821), ("Increment", 841), ("Decrement", 861)):
        members += _family(prefix, base)

    for prefix, base in (
        ("BitwiseAnd", 900),
        ("BitwiseOr", 910),
        ("BitwiseXor", 920),
        ("BitwiseNot", 930),
        ("ShiftLeft", 940),
        ("ShiftRight", 950),
    ):
        members += _family(prefix, base, _INT_TYPES)

    members += [("Print", 1000), ("StoreConstantArray", 1030)]

    # The signed byte variant of DebugPrint sits apart from its siblings.
    members += [
        (name, 20004 if name == "DebugPrintI8" else value)
        for name, value in _family("DebugPrint", 2000)
    ]
    members.append(("DebugPrintRaw", 2010))
    return members


OpCode = IntEnum("OpCode", _build_members(), module=__name__, qualname="OpCode")
OpCode.__doc__ = "Every instruction the virtual machine understands, keyed by its u16 code."

_U16_MAX = 0xFFFF


def opcode_from_name(name: str) -> OpCode:
    """Return the opcode whose mnemonic is exactly ``name``."""
    try:
        return OpCode[name]
    except KeyError:
        raise ValueError(f"unknown opcode name: {name!r}") from None


def opcode_from_value(value: int) -> OpCode:
    """Return the opcode with the numeric code ``value``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"opcode value must be an integer, not {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"opcode value out of u16 range: {value}")
    try:
        return OpCode(value)
    except ValueError:
        raise ValueError(f"no opcode with value {value}") from None