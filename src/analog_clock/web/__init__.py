"""Web view for Analog Clock."""
