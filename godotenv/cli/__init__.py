"""GodotEnv command-line interface."""
