"""Terminal front end: settings, key bindings, driver loop and renderer."""
