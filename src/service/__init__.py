"""Score fetching and loading services."""
