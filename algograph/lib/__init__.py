"""Graph stores, grids, paths and library integrations for algograph."""
