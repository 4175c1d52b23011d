"""Host plugin contracts and implementations."""
