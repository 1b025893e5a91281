"""Engine core: input, events, timers, transforms, geometry and editor logic."""

__version__ = "0.1.0"

__all__ = [
    "keys",
    "events",
    "input",
    "linked_list",
    "logsystem",
    "timers",
    "geometry",
    "transform",
    "application",
    "window_events",
    "ui_layouts",
    "camera_controls",
    "editor",
]