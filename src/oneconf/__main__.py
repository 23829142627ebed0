# topmark:header:start
#
#   project      : oneconf
#   file         : __main__.py
#   file_relpath : src/oneconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running oneconf via ``python -m oneconf``.

Delegates to :func:`oneconf.cli.main.cli`, the same entry point as the
``oneconf`` console script.
"""

from __future__ import annotations

from oneconf.cli.main import cli

if __name__ == "__main__":
    cli()
