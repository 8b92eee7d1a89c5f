# topmark:header:start
#
#   project      : ValueText
#   file         : __main__.py
#   file_relpath : src/valuetext/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m valuetext``."""

from valuetext.cli.main import cli

if __name__ == "__main__":
    cli()
