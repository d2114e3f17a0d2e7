"""Report image processing for Community Mangrove Watch."""
