"""Starter .gitpane.toml template."""

DEFAULT_TOML = """\
# gitpane configuration
version = "1.0"

[git]
binary = "git"
timeout = 30              # seconds per git invocation

[output]
format = "terminal"       # terminal | json | yaml
show_summary = true

[logging]
level = "warning"         # debug | info | warning | error
"""
