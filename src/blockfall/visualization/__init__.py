"""pygame front end for blockfall."""
