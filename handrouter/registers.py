"""Text renderings of 32-bit driver register values."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def _check(data: int) -> int:
    if not 0 <= data <= _MASK:
        raise ValueError("register value must fit in 32 unsigned bits")
    return data


def format_hex(data: int) -> str:
    """Render as four colon-separated upper-case hex bytes, most significant first."""
    data = _check(data)
    return ":".join(f"{(data >> shift) & 0xFF:02X}" for shift in (24, 16, 8, 0))


def format_bin(data: int) -> str:
    """Render as four dot-separated groups of eight bits, most significant first."""
    data = _check(data)
    return ".".join(f"{(data >> shift) & 0xFF:08b}" for shift in (24, 16, 8, 0))