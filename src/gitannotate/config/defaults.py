"""Starter .gitannotate.toml template."""

DEFAULT_TOML = """\
# gitannotate configuration
# Looked up via --config, $GITANNOTATE_CONFIG, then ./.gitannotate.toml

[glyphs]
created = "●"
deleted = "●"
renamed_away = "←"
renamed_in = "→"
unchanged = "▪"

[colors]                  # any Rich style string, e.g. "bold green"
created = "green"
deleted = "red"
renamed_away = "red"
renamed_in = "green"
unchanged = "blue"
percent = "yellow"

[output]
color = "always"          # always | never | auto
percent_separator = "\\t\\t"

[paths]
ls_colors = true          # style path components from $LS_COLORS
"""
