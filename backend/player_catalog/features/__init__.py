"""Feature modules of the player catalog."""
