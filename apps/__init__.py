"""Domain apps of the ShareIt project."""
