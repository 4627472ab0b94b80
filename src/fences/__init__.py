"""Glass pool-fence layout and bill of materials calculator."""

__version__ = "0.1.0"
