# topmark:header:start
#
#   project      : ValueText
#   file         : __init__.py
#   file_relpath : src/valuetext/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText package.

ValueText renders arbitrary Python values as human-readable text through an
extensible, ordered registry of formatting components. Values no component
claims fall through to a reflective formatter producing
``TypeName{field=value, ...}``.

```python
from valuetext import render

render(None)              # "<null>"
render(True)              # "<true>"
render({"name": [1, 2]})  # "{name = [1, 2]}"
render(Point(1, 2))       # "Point{x=1, y=2}"
```
"""

from __future__ import annotations

from valuetext.components import ANY, Component, Entry
from valuetext.config.options import (
    OptionsTable,
    RenderOptions,
    configure_type,
    render_exclude,
    render_options,
)
from valuetext.core.dispatcher import (
    Dispatcher,
    get_dispatcher,
    register_component,
    register_components,
    remove_component,
    render,
    render_instance,
)

__all__ = [
    "ANY",
    "Component",
    "Dispatcher",
    "Entry",
    "OptionsTable",
    "RenderOptions",
    "configure_type",
    "get_dispatcher",
    "register_component",
    "register_components",
    "remove_component",
    "render",
    "render_exclude",
    "render_instance",
    "render_options",
]
