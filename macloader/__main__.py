"""
Macloader Module Entry Point
=============================

Allows running the provisioning tool via: python -m macloader
"""

from macloader.cli import main

if __name__ == "__main__":
    main()
