"""
Entry point for running GodotEnv CLI as a module.

Usage: python -m godotenv [command] [options]
"""

from godotenv.cli.parser import main

if __name__ == "__main__":
    main()
