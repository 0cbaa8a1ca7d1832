"""slipbox: personal note and desktop shortcuts."""
