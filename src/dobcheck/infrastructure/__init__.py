"""Infrastructure layer — adapters over the host clock."""
