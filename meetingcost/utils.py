"""
Small utility functions: money formatting and the clipboard text sink.
"""

from __future__ import annotations

import subprocess

from .config import CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount as e.g. $1,234.56 (negative amounts as -$1.00)."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def copy_to_clipboard(text: str) -> None:
    """Put text on the macOS clipboard via pbcopy."""
    try:
        r = subprocess.run(
            ["pbcopy"],
            input=text,
            text=True,
            check=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError:
        raise RuntimeError("pbcopy not found. Clipboard copy is only supported on macOS.")
    if r.returncode != 0:
        raise RuntimeError(f"pbcopy failed ({r.returncode}): {(r.stderr or '').strip()}")
