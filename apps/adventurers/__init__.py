"""Guild adventurers service."""
