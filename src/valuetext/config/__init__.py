# topmark:header:start
#
#   project      : ValueText
#   file         : __init__.py
#   file_relpath : src/valuetext/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for ValueText: logging, per-type render options and TOML settings.

Submodules:
    * [`valuetext.config.logging`][valuetext.config.logging]: TRACE level and
      colored log output.
    * [`valuetext.config.options`][valuetext.config.options]: `RenderOptions`
      and the type-keyed `OptionsTable`.
    * [`valuetext.config.io`][valuetext.config.io]: loading, applying and
      dumping TOML settings.
"""

from __future__ import annotations
