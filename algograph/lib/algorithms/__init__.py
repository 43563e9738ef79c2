"""Graph algorithms: traversal, shortest paths, spanning trees, flow and ordering."""
