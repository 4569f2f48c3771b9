"""Infrastructure layer — roster files and the host clock."""
