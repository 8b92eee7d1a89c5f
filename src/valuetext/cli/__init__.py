# topmark:header:start
#
#   project      : ValueText
#   file         : __init__.py
#   file_relpath : src/valuetext/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText command line interface (Click)."""
