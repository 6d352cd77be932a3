# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envline CLI (run via ``envline`` or ``python -m envline``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envline.cli import cli
    except ImportError:
        sys.stderr.write("Envline CLI dependencies missing. Install with: pip install envline\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
