"""
Main module entry point.

This allows running the poller as: python -m minerwatch.main
"""

from .poller import main

if __name__ == "__main__":
    main()
