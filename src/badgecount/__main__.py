"""Entry point for running badgecount as a module.

Usage:
    python -m badgecount
"""

from badgecount.app import main

if __name__ == "__main__":
    main()
