"""Terminal front end: I/O, windows, elements, demos and the command line."""
