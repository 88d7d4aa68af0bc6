"""Services package - badge platform, counter state and configuration."""
