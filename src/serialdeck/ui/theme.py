"""Dark theme configuration for the terminal UI."""

from __future__ import annotations

from serialdeck.models.notification import NotificationLevel

COLORS = {
    "bg_primary": "#0d1117",
    "bg_secondary": "#161b22",
    "bg_tertiary": "#21262d",
    "border": "#30363d",
    "text_primary": "#e6edf3",
    "text_secondary": "#8b949e",
    "text_muted": "#484f58",
    "accent_blue": "#58a6ff",
    "accent_green": "#3fb950",
    "accent_red": "#f85149",
    "accent_yellow": "#d29922",
    "accent_purple": "#bc8cff",
    "accent_orange": "#d18616",
    "rx": "#3fb950",
    "tx": "#58a6ff",
    "pane_focused": "#d29922",
    "pane_idle": "#30363d",
}

LEVEL_COLORS = {
    NotificationLevel.INFO: COLORS["accent_blue"],
    NotificationLevel.WARNING: COLORS["accent_yellow"],
    NotificationLevel.ERROR: COLORS["accent_red"],
    NotificationLevel.SUCCESS: COLORS["accent_green"],
}

CSS = f"""
Screen {{
    layers: base overlay;
    background: {COLORS["bg_primary"]};
    color: {COLORS["text_primary"]};
}}

#menu-bar {{
    height: 1;
    background: {COLORS["bg_tertiary"]};
}}

#tab-bar {{
    height: 1;
    background: {COLORS["bg_secondary"]};
}}

#workspace {{
    height: 1fr;
}}

SessionPane {{
    position: absolute;
    border: round {COLORS["pane_idle"]};
    background: {COLORS["bg_secondary"]};
    border-title-color: {COLORS["text_secondary"]};
}}

SessionPane.focused {{
    border: heavy {COLORS["pane_focused"]};
    border-title-color: {COLORS["pane_focused"]};
}}

#status-line {{
    dock: bottom;
    height: 1;
    background: {COLORS["bg_tertiary"]};
    padding: 0 1;
}}

#menu-dropdown {{
    position: absolute;
    layer: overlay;
    width: auto;
    height: auto;
    border: round {COLORS["accent_blue"]};
    background: {COLORS["bg_tertiary"]};
}}

#help-overlay {{
    position: absolute;
    layer: overlay;
    width: auto;
    height: auto;
    border: double {COLORS["accent_purple"]};
    background: {COLORS["bg_tertiary"]};
    padding: 0 1;
}}
"""
