"""addimport command-line interface."""
