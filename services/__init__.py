"""Service layer: identifier parsing, Data API access, response mapping and the tool operations."""
