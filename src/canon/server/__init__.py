"""HTTP publishing of registry listings."""
