# topmark:header:start
#
#   project      : ValueText
#   file         : __init__.py
#   file_relpath : src/valuetext/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component registry views.

```python
from valuetext.registry import ComponentRegistry

for meta in ComponentRegistry().iter_meta():
    print(meta.position, meta.name, meta.supported_types)
```
"""

from __future__ import annotations

from .components import ComponentMeta, ComponentRegistry

__all__ = [
    "ComponentMeta",
    "ComponentRegistry",
]
