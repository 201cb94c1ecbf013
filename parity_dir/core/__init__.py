"""Path resolution for Parity directories."""
