"""
Entry point for running the package as a module.

Usage:
    $ python -m todo_cli add "My task" 3
    $ python -m todo_cli --help
"""

from .main import app

if __name__ == "__main__":
    app()
