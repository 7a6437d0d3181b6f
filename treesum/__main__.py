"""Allow running treesum with ``python -m treesum``."""

from treesum.cli import app

app(prog_name="treesum")
