"""Domain services that span more than one resource."""
