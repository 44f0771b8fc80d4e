"""HTTP surface for requesting agent decisions."""
