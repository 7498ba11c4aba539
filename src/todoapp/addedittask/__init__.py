"""Add/edit task screen: presenter logic (the view lives in connectors/)."""
