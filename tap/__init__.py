"""tap - command-line task tracker with deadlines."""
