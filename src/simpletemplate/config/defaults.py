"""Default configuration and scaffold templates for simpletemplate."""
from __future__ import annotations

DEFAULT_CONFIG_PATH: str = "simpletemplate.yaml"

DEFAULT_CONFIG_YAML: str = """\
# simpletemplate configuration

template:
  path: "templates/index.html"
  encoding: "utf-8"

data:
  # path: null  # JSON (.json) or YAML (.yaml/.yml) data file
  format: "auto"

output:
  # path: null  # Write to a file instead of stdout
  trailing_newline: true

logging:
  level: "WARNING"
"""

SAMPLE_TEMPLATE: str = """\
<!DOCTYPE html>
<html>
<body>
  <h1>Hello, {{ name }}!</h1>
  <p>Your number is {{ number }} and your favourite color is {{ color }}.</p>
  <p>First name: {{ name[0] }}</p>
{{ if show_items }}
  <ul>
{{ for part in name }}
    <li>{{ index }}: {{ part }}</li>
{{ endfor }}
  </ul>
{{ endif }}
  {{ if show_foo }}<p>foo is shown</p>{{ else }}<p>foo is hidden</p>{{ endif }}
</body>
</html>
"""
