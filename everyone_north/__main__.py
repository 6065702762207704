"""
Allows ``python -m everyone_north``.
"""

from .main import cli

if __name__ == '__main__':
    cli()
