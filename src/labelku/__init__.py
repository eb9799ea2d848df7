"""
LabelKu - shipping receipt labels

Renders shipping receipts onto small label sizes (30x55mm up to
100x180mm) as single-page PDFs, plus a plain-text version for sharing.
"""

__version__ = "1.0.0"
__author__ = "LabelKu"
__license__ = "GPL-3.0"


def main() -> int:
    """Main entry point for the application.

    Returns:
        The application exit code.
    """
    from labelku.cli import main as cli_main

    return cli_main()


__all__ = ["main", "__version__", "__author__", "__license__"]
